"""
Declarative core: descriptors, stacks, declaration sets, rendering.

Nothing in this package touches the network, the filesystem, or Pulumi.
"""

from samples_iac.core.descriptors import (
    ParameterEntry,
    Queue,
    QueueTarget,
    ResourceDescriptor,
    SecretDescriptor,
    SecretGeneration,
    Subscription,
    Topic,
    UrlTarget,
)
from samples_iac.core.exceptions import ConfigurationError
from samples_iac.core.registry import StackResource, StackResourceRegistry
from samples_iac.core.rendering import render
from samples_iac.core.stack import Binding, DeclarationSet, Stack

__all__ = [
    "Binding",
    "ConfigurationError",
    "DeclarationSet",
    "ParameterEntry",
    "Queue",
    "QueueTarget",
    "ResourceDescriptor",
    "SecretDescriptor",
    "SecretGeneration",
    "Stack",
    "StackResource",
    "StackResourceRegistry",
    "Subscription",
    "Topic",
    "UrlTarget",
    "render",
]
