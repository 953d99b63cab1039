"""
Resource naming conventions for consistent AWS resource names.

Queue names follow pattern: {stack_id}-{suffix}
Parameter paths follow pattern: {namespace}/{app}/{key}
"""

from dataclasses import dataclass

from samples_iac.configs.constants import PARAMETER_NAMESPACE


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for one stack.

    Attributes:
        stack_id: Stack identifier used as name prefix
    """
    stack_id: str

    def name(self, suffix: str) -> str:
        """
        Generate a stack-scoped resource name.

        Args:
            suffix: Resource suffix (e.g., 'sample-queue')

        Returns:
            Name unique to this stack
        """
        return f"{self.stack_id}-{suffix}"

    def queue_name(self, suffix: str) -> str:
        """Generate an SQS queue name derived from the stack id."""
        return self.name(suffix)

    @staticmethod
    def parameter_path(app: str, key: str, namespace: str = PARAMETER_NAMESPACE) -> str:
        """
        Generate a Parameter Store path.

        Args:
            app: Application name under the namespace
            key: Parameter key
            namespace: Path prefix, defaults to /config

        Returns:
            Path such as /config/spring/message
        """
        return f"{namespace.rstrip('/')}/{app}/{key}"

    def component_name(self, resource: str) -> str:
        """Pulumi resource name for a logical id, unique across stacks."""
        return f"{self.stack_id}-{resource}"
