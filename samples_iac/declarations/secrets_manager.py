"""
Secrets Manager sample declarations.

Creates:
- One secret whose `password` field is generated by the provider and whose
  remaining JSON body comes from a fixed template
"""

from samples_iac.configs.constants import (
    SAMPLE_SECRET_GENERATED_KEY,
    SAMPLE_SECRET_NAME,
    SAMPLE_SECRET_TEMPLATE,
)
from samples_iac.core.descriptors import SecretDescriptor, SecretGeneration
from samples_iac.core.stack import DeclarationSet, Stack


def declare_secret(stack: Stack) -> SecretDescriptor:
    """
    Declare the sample application secret.

    Args:
        stack: Owning stack

    Returns:
        Secret descriptor with its generation rule
    """
    return SecretDescriptor(
        logical_id="SampleAppSecret",
        secret_name=SAMPLE_SECRET_NAME,
        description=f"Credentials for the secrets manager sample ({stack.stack_id})",
        generation=SecretGeneration(
            generate_key=SAMPLE_SECRET_GENERATED_KEY,
            template=dict(SAMPLE_SECRET_TEMPLATE),
        ),
    )


def secrets_manager_stack(stack: Stack, **_: object) -> DeclarationSet:
    """Declaration set for the Secrets Manager sample."""
    return DeclarationSet.assemble(stack, declare_secret(stack))
