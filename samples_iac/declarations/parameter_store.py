"""
Parameter Store sample declarations.

Creates:
- One String parameter per entry of SAMPLE_PARAMETERS under /config/<app>/
"""

from samples_iac.configs.constants import DEFAULT_APP_NAME, SAMPLE_PARAMETERS
from samples_iac.core.descriptors import ParameterEntry
from samples_iac.core.stack import DeclarationSet, Stack


def _logical_id(key: str) -> str:
    return f"{key[:1].upper()}{key[1:]}Parameter"


def declare_parameters(
    stack: Stack,
    app_name: str = DEFAULT_APP_NAME,
    values: dict[str, str] | None = None,
) -> list[ParameterEntry]:
    """
    Declare the sample parameters.

    Args:
        stack: Owning stack
        app_name: Application segment of the parameter path
        values: Key to value mapping, defaults to SAMPLE_PARAMETERS

    Returns:
        Parameter entries in key order of `values`
    """
    values = SAMPLE_PARAMETERS if values is None else values
    return [
        ParameterEntry(
            logical_id=_logical_id(key),
            path=stack.namer.parameter_path(app_name, key),
            value=value,
            description=f"Sample value for {app_name} {key}",
        )
        for key, value in values.items()
    ]


def parameter_store_stack(stack: Stack, app_name: str = DEFAULT_APP_NAME, **_: object) -> DeclarationSet:
    """Declaration set for the Parameter Store sample."""
    return DeclarationSet.assemble(stack, declare_parameters(stack, app_name))
