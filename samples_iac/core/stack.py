"""
Stacks and declaration sets.

A `Stack` is a named deployment unit. A `DeclarationSet` is the validated,
immutable collection of descriptors owned by one stack plus the topic to
target bindings derived from its subscriptions. Declaration functions receive
the stack explicitly and return descriptors; nothing registers itself with an
ambient context.

Dependencies: pydantic (descriptors)
System role: Validation boundary between declarations and provisioning
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from samples_iac.core.descriptors import (
    DESCRIPTOR_TYPES,
    ParameterEntry,
    Queue,
    QueueTarget,
    ResourceDescriptor,
    Subscription,
    Topic,
    UrlTarget,
)
from samples_iac.core.exceptions import (
    DanglingReferenceError,
    DuplicateLogicalIdError,
    DuplicateParameterPathError,
    InvalidStackError,
)
from samples_iac.observability.logger import get_logger
from samples_iac.utils.naming import ResourceNamer

logger = get_logger(__name__)


@dataclass(frozen=True)
class Stack:
    """
    Named container for resource declarations.

    Attributes:
        stack_id: Stack identifier, also the prefix for derived resource names
        environment: Deployment environment label
        region: AWS region, inherited from the provider when unset
        account: AWS account, inherited from the provider when unset
        tags: Extra tags applied to every resource of the stack
    """
    stack_id: str
    environment: str = "dev"
    region: str | None = None
    account: str | None = None
    tags: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.stack_id or not self.stack_id.strip():
            raise InvalidStackError("Stack identifier must not be empty")
        if "." in self.stack_id:
            raise InvalidStackError(
                f"Stack identifier must not contain '.': {self.stack_id}", stack_id=self.stack_id
            )

    @property
    def namer(self) -> ResourceNamer:
        """Resource namer scoped to this stack."""
        return ResourceNamer(stack_id=self.stack_id)


@dataclass(frozen=True)
class Binding:
    """Directed edge from a topic to one delivery target."""
    topic_id: str
    subscription_id: str
    target: QueueTarget | UrlTarget

    @property
    def protocol(self) -> str:
        return self.target.protocol


def _flatten(groups: Iterable[Any]) -> Iterator[ResourceDescriptor]:
    for group in groups:
        if isinstance(group, DESCRIPTOR_TYPES):
            yield group
        elif isinstance(group, (str, bytes, BaseModel)) or not isinstance(group, Iterable):
            raise TypeError(f"Not a resource descriptor: {group!r}")
        else:
            yield from _flatten(group)


def _validate(stack: Stack, descriptors: tuple[ResourceDescriptor, ...]) -> None:
    by_id: dict[str, ResourceDescriptor] = {}
    paths: set[str] = set()

    for descriptor in descriptors:
        if descriptor.logical_id in by_id:
            raise DuplicateLogicalIdError(descriptor.logical_id, stack.stack_id)
        by_id[descriptor.logical_id] = descriptor

        if isinstance(descriptor, ParameterEntry):
            if descriptor.path in paths:
                raise DuplicateParameterPathError(descriptor.path, stack.stack_id)
            paths.add(descriptor.path)

    for descriptor in descriptors:
        if not isinstance(descriptor, Subscription):
            continue

        if not isinstance(by_id.get(descriptor.topic_id), Topic):
            raise DanglingReferenceError(
                descriptor.logical_id, descriptor.topic_id, stack.stack_id, expected_kind="topic"
            )

        target = descriptor.target
        if isinstance(target, QueueTarget) and not isinstance(by_id.get(target.queue_id), Queue):
            raise DanglingReferenceError(
                descriptor.logical_id, target.queue_id, stack.stack_id, expected_kind="queue"
            )


class DeclarationSet:
    """
    Validated descriptors of one stack, in declaration order.

    Instances are only built through `assemble()`, which either returns a
    complete, consistent set or raises a `ConfigurationError`.
    """

    def __init__(self, stack: Stack, descriptors: tuple[ResourceDescriptor, ...]) -> None:
        self._stack = stack
        self._descriptors = descriptors
        self._by_id = {d.logical_id: d for d in descriptors}

    @classmethod
    def assemble(cls, stack: Stack, *groups: Any) -> "DeclarationSet":
        """
        Validate and freeze the descriptors declared for a stack.

        Args:
            stack: Owning stack
            *groups: Descriptors, sequences of descriptors, or
                `(Topic, [Subscription, ...])` tuples, in declaration order

        Returns:
            DeclarationSet holding every descriptor

        Raises:
            DuplicateLogicalIdError: If two descriptors share a logical id
            DuplicateParameterPathError: If two parameters share a path
            DanglingReferenceError: If a subscription references a missing topic or queue
        """
        descriptors = tuple(_flatten(groups))
        _validate(stack, descriptors)
        logger.debug("Declared %d resources for stack %s", len(descriptors), stack.stack_id)
        return cls(stack, descriptors)

    @property
    def stack(self) -> Stack:
        return self._stack

    @property
    def descriptors(self) -> tuple[ResourceDescriptor, ...]:
        return self._descriptors

    def __iter__(self) -> Iterator[ResourceDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, logical_id: object) -> bool:
        return logical_id in self._by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeclarationSet):
            return NotImplemented
        return self._stack == other._stack and self._descriptors == other._descriptors

    def __repr__(self) -> str:
        return f"DeclarationSet(stack_id={self._stack.stack_id!r}, resources={len(self)})"

    def get(self, logical_id: str) -> ResourceDescriptor | None:
        """Look up a descriptor by logical id."""
        return self._by_id.get(logical_id)

    def of_kind(self, kind: str) -> list[ResourceDescriptor]:
        """All descriptors of one kind, in declaration order."""
        return [d for d in self._descriptors if d.kind == kind]

    @property
    def bindings(self) -> list[Binding]:
        """Topic to target edges, one per subscription."""
        return [
            Binding(topic_id=d.topic_id, subscription_id=d.logical_id, target=d.target)
            for d in self._descriptors
            if isinstance(d, Subscription)
        ]

    def subscriptions_for(self, topic_id: str) -> list[Subscription]:
        """Subscriptions owned by a topic."""
        return [
            d for d in self._descriptors
            if isinstance(d, Subscription) and d.topic_id == topic_id
        ]
