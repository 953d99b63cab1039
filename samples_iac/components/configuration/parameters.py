"""
Parameter Store component.

Creates one String parameter per ParameterEntry of a stack.
"""

from collections.abc import Sequence

import pulumi
import pulumi_aws as aws

from samples_iac.core.descriptors import ParameterEntry
from samples_iac.core.stack import Stack
from samples_iac.utils.tags import create_tags, merge_tags


class ParameterStoreComponent(pulumi.ComponentResource):
    """SSM parameters declared by one stack."""

    def __init__(
        self,
        name: str,
        stack: Stack,
        parameters: Sequence[ParameterEntry],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("samples:configuration:ParameterStore", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.parameters: dict[str, aws.ssm.Parameter] = {}
        for entry in parameters:
            self.parameters[entry.logical_id] = aws.ssm.Parameter(
                stack.namer.component_name(entry.logical_id),
                name=entry.path,
                type="String",
                value=entry.value,
                description=entry.description,
                tier=entry.tier,
                tags=merge_tags(create_tags(stack.environment, entry.path), stack.tags),
                opts=child_opts,
            )

        self.register_outputs({
            "parameter_names": {k: p.name for k, p in self.parameters.items()},
        })

    def get_parameter_names(self) -> dict[str, pulumi.Output[str]]:
        """Get parameter names keyed by logical id."""
        return {k: p.name for k, p in self.parameters.items()}
