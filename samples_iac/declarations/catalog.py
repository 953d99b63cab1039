"""
Catalog of sample stacks.

Each entry maps a sample name to a builder taking the owning stack and
keyword options (app_name, sns_endpoint_url) and returning its declaration set.
Builders ignore options they do not use.
"""

from collections.abc import Callable

from samples_iac.core.exceptions import UnknownSampleError
from samples_iac.core.stack import DeclarationSet, Stack
from samples_iac.declarations.parameter_store import parameter_store_stack
from samples_iac.declarations.secrets_manager import secrets_manager_stack
from samples_iac.declarations.sns import sns_stack
from samples_iac.declarations.sqs import sqs_stack

StackBuilder = Callable[..., DeclarationSet]


def empty_stack(stack: Stack, **_: object) -> DeclarationSet:
    """Stack with no resources."""
    return DeclarationSet.assemble(stack)


SAMPLE_STACKS: dict[str, StackBuilder] = {
    "parameter-store": parameter_store_stack,
    "secrets-manager": secrets_manager_stack,
    "sns": sns_stack,
    "sqs": sqs_stack,
}


def build_sample(name: str, stack: Stack, **options: object) -> DeclarationSet:
    """
    Build the declaration set of a sample stack.

    Args:
        name: Catalog name
        stack: Owning stack
        **options: Builder options

    Raises:
        UnknownSampleError: If `name` is not in the catalog
    """
    builder = SAMPLE_STACKS.get(name)
    if builder is None:
        raise UnknownSampleError(name, sorted(SAMPLE_STACKS))
    return builder(stack, **options)
