"""
Utility functions for the sample infrastructure.

Provides naming conventions and tag factories.
"""

from samples_iac.utils.naming import ResourceNamer
from samples_iac.utils.tags import create_tags, merge_tags

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
]
