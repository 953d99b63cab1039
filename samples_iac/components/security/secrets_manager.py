"""
Secrets Manager component.

Creates one secret per SecretDescriptor. The generated field is filled from a
`random.RandomPassword` resource, so the value persists in state across
deployments; the rest of the JSON body is the descriptor's template.
"""

import json
from collections.abc import Sequence

import pulumi
import pulumi_aws as aws
import pulumi_random as random

from samples_iac.configs.constants import SECRET_DEFAULTS
from samples_iac.core.descriptors import SecretDescriptor, SecretGeneration
from samples_iac.core.stack import Stack
from samples_iac.utils.tags import create_tags, merge_tags


def _secret_string(generation: SecretGeneration, password: pulumi.Output[str]) -> pulumi.Output[str]:
    return pulumi.Output.secret(
        password.apply(lambda value: json.dumps(generation.build_body(value)))
    )


class SecretsManagerComponent(pulumi.ComponentResource):
    """Secrets declared by one stack."""

    def __init__(
        self,
        name: str,
        stack: Stack,
        secrets: Sequence[SecretDescriptor],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("samples:security:SecretsManager", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.secrets: dict[str, aws.secretsmanager.Secret] = {}
        self.passwords: dict[str, random.RandomPassword] = {}
        self.versions: dict[str, aws.secretsmanager.SecretVersion] = {}
        for descriptor in secrets:
            generation = descriptor.generation
            resource_name = stack.namer.component_name(descriptor.logical_id)

            secret = aws.secretsmanager.Secret(
                resource_name,
                name=descriptor.secret_name,
                description=descriptor.description,
                recovery_window_in_days=SECRET_DEFAULTS["recovery_window_in_days"],
                tags=merge_tags(create_tags(stack.environment, descriptor.secret_name), stack.tags),
                opts=child_opts,
            )

            password = random.RandomPassword(
                f"{resource_name}-password",
                length=generation.password_length,
                special=not generation.exclude_punctuation,
                opts=child_opts,
            )

            self.versions[descriptor.logical_id] = aws.secretsmanager.SecretVersion(
                f"{resource_name}-version",
                secret_id=secret.id,
                secret_string=_secret_string(generation, password.result),
                opts=child_opts,
            )

            self.secrets[descriptor.logical_id] = secret
            self.passwords[descriptor.logical_id] = password

        self.register_outputs({
            "secret_arns": {k: s.arn for k, s in self.secrets.items()},
        })

    def get_secret_arns(self) -> dict[str, pulumi.Output[str]]:
        """Get secret ARNs keyed by logical id."""
        return {k: s.arn for k, s in self.secrets.items()}
