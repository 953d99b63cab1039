"""
Configuration components.

Components:
- ParameterStoreComponent: SSM String parameters
"""

from samples_iac.components.configuration.parameters import ParameterStoreComponent

__all__ = [
    "ParameterStoreComponent",
]
