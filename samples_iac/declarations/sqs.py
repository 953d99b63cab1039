"""
SQS sample declarations.

Queue names are derived from the stack id, so stacks deployed under different
ids never share a queue.
"""

from samples_iac.configs.constants import QUEUE_SUFFIXES
from samples_iac.core.descriptors import Queue
from samples_iac.core.stack import DeclarationSet, Stack


def _logical_id(suffix: str) -> str:
    return "".join(part.capitalize() for part in suffix.split("-"))


def declare_queues(stack: Stack, suffixes: tuple[str, ...] = QUEUE_SUFFIXES) -> list[Queue]:
    """
    Declare the sample queues.

    Args:
        stack: Owning stack
        suffixes: Name suffixes, one queue each

    Returns:
        Queues named <stackId>-<suffix>, in suffix order
    """
    return [
        Queue(logical_id=_logical_id(suffix), queue_name=stack.namer.queue_name(suffix))
        for suffix in suffixes
    ]


def sqs_stack(stack: Stack, **_: object) -> DeclarationSet:
    """Declaration set for the SQS sample."""
    return DeclarationSet.assemble(stack, declare_queues(stack))
