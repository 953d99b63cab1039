"""
Static stack resource registry.

Maps logical ids to the physical names the provider will assign, across one
or more declared stacks. Resources are keyed as `<stackId>.<logicalId>`; an
unqualified logical id resolves only when exactly one stack declares it.

Dependencies: None (built from declaration sets)
System role: Lookup of provider names by logical id for application config
"""

from dataclasses import dataclass

from samples_iac.configs.constants import RESOURCE_TYPES
from samples_iac.core.descriptors import physical_name
from samples_iac.core.exceptions import ConfigurationError
from samples_iac.core.stack import DeclarationSet


@dataclass(frozen=True)
class StackResource:
    """One declared resource as seen by the registry."""
    logical_id: str
    physical_id: str
    resource_type: str


class StackResourceRegistry:
    """Registry of resources from one or more declaration sets."""

    def __init__(self, resources: dict[str, StackResource], stack_names: list[str]) -> None:
        self._resources = resources
        self._stack_names = stack_names

    @classmethod
    def from_declarations(cls, *declarations: DeclarationSet) -> "StackResourceRegistry":
        """
        Build a registry from declaration sets.

        Raises:
            ConfigurationError: If the same stack id appears twice
        """
        resources: dict[str, StackResource] = {}
        stack_names: list[str] = []

        for declaration in declarations:
            stack_id = declaration.stack.stack_id
            if stack_id in stack_names:
                raise ConfigurationError("Stack declared twice in registry", stack_id)
            stack_names.append(stack_id)

            topic_names = {t.logical_id: t.topic_name for t in declaration.of_kind("topic")}
            for descriptor in declaration:
                key = f"{stack_id}.{descriptor.logical_id}"
                resources[key] = StackResource(
                    logical_id=key,
                    physical_id=physical_name(descriptor, topic_names),
                    resource_type=RESOURCE_TYPES[descriptor.kind],
                )

        return cls(resources, stack_names)

    @property
    def stack_names(self) -> list[str]:
        return list(self._stack_names)

    def lookup_physical_resource_id(self, logical_id: str) -> str | None:
        """
        Resolve a logical id to its physical name.

        Args:
            logical_id: Qualified `<stackId>.<logicalId>` or bare logical id

        Returns:
            Physical name, or None if unknown or ambiguous
        """
        if logical_id in self._resources:
            return self._resources[logical_id].physical_id
        if "." in logical_id:
            return None

        suffix = f".{logical_id}"
        matches = [r for key, r in self._resources.items() if key.endswith(suffix)]
        if len(matches) != 1:
            return None
        return matches[0].physical_id

    def all_resources(self) -> list[StackResource]:
        return list(self._resources.values())

    def resources_by_type(self, resource_type: str) -> list[StackResource]:
        return [r for r in self._resources.values() if r.resource_type == resource_type]
