"""
Configuration module for the sample infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from samples_iac.configs.base import EnvironmentConfig
from samples_iac.configs.environment import get_config
from samples_iac.configs.constants import (
    DEFAULT_TAGS,
    PARAMETER_NAMESPACE,
    QUEUE_SUFFIXES,
    RESOURCE_TYPES,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "DEFAULT_TAGS",
    "PARAMETER_NAMESPACE",
    "QUEUE_SUFFIXES",
    "RESOURCE_TYPES",
]
