"""
Structural rendering of declaration sets.

Produces a CloudFormation-shaped mapping of logical id to resource type and
properties. Used to compare declarations against expected snapshots; an empty
stack renders to `{}`.
"""

from typing import Any

from samples_iac.configs.constants import RESOURCE_TYPES
from samples_iac.core.descriptors import QueueTarget, ResourceDescriptor, Subscription
from samples_iac.core.stack import DeclarationSet

_EXCLUDED_FIELDS = {"kind", "logical_id"}


def render_properties(descriptor: ResourceDescriptor) -> dict[str, Any]:
    """
    Render the property bag of one descriptor.

    Queue-backed subscriptions reference their queue as `{"Ref": <logicalId>}`
    so the rendered form stays a graph of logical ids.
    """
    properties = descriptor.model_dump(mode="json", exclude=_EXCLUDED_FIELDS, exclude_none=True)

    if isinstance(descriptor, Subscription):
        target = descriptor.target
        properties["protocol"] = target.protocol
        properties["topic"] = {"Ref": descriptor.topic_id}
        del properties["topic_id"]
        if isinstance(target, QueueTarget):
            properties["target"] = {
                "type": target.type,
                "queue": {"Ref": target.queue_id},
                "raw_message_delivery": target.raw_message_delivery,
            }

    return properties


def render(declarations: DeclarationSet) -> dict[str, dict[str, Any]]:
    """
    Render a declaration set to its structural form.

    Args:
        declarations: Validated declaration set

    Returns:
        Mapping of logical id to {"Type": ..., "Properties": ...}
    """
    return {
        descriptor.logical_id: {
            "Type": RESOURCE_TYPES[descriptor.kind],
            "Properties": render_properties(descriptor),
        }
        for descriptor in declarations
    }
