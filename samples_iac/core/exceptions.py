"""
Exception hierarchy for sample infrastructure declarations.

Every error is raised while a declaration set is being constructed, never
during provisioning. Construction aborts and the error propagates to the
caller; there is no partial declaration set.

Dependencies: None (pure domain layer)
System role: Centralized error taxonomy for declaration and provisioning
"""

from typing import Any


class SamplesIacException(Exception):
    """Base exception for all samples-iac errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(SamplesIacException):
    """Raised when a declaration set is internally inconsistent."""

    def __init__(
        self,
        message: str,
        stack_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            stack_id: Identifier of the stack being declared
            details: Additional context
        """
        details = details or {}
        if stack_id:
            details["stack_id"] = stack_id
        super().__init__(message, details)


class InvalidStackError(ConfigurationError):
    """Raised when a stack identifier is unusable."""

    pass


class DuplicateLogicalIdError(ConfigurationError):
    """Raised when two descriptors share a logical id within one stack."""

    def __init__(self, logical_id: str, stack_id: str | None = None) -> None:
        super().__init__(
            f"Duplicate logical id: {logical_id}",
            stack_id,
            {"logical_id": logical_id},
        )


class DuplicateParameterPathError(ConfigurationError):
    """Raised when two parameter entries share a path within one stack."""

    def __init__(self, path: str, stack_id: str | None = None) -> None:
        super().__init__(
            f"Duplicate parameter path: {path}",
            stack_id,
            {"path": path},
        )


class DanglingReferenceError(ConfigurationError):
    """Raised when a subscription references a resource missing from its stack."""

    def __init__(
        self,
        source_id: str,
        target_id: str,
        stack_id: str | None = None,
        expected_kind: str | None = None,
    ) -> None:
        """
        Initialize dangling reference error.

        Args:
            source_id: Logical id of the referencing descriptor
            target_id: Logical id that could not be resolved
            stack_id: Identifier of the stack being declared
            expected_kind: Descriptor kind the reference must resolve to
        """
        details: dict[str, Any] = {"source_id": source_id, "target_id": target_id}
        if expected_kind:
            details["expected_kind"] = expected_kind
        super().__init__(
            f"{source_id} references unknown resource: {target_id}",
            stack_id,
            details,
        )


class SecretTemplateConflictError(ConfigurationError):
    """Raised when a generated secret field would overwrite a template key."""

    def __init__(self, generate_key: str) -> None:
        super().__init__(
            f"Generated key '{generate_key}' already present in secret template",
            details={"generate_key": generate_key},
        )


class UnknownSampleError(ConfigurationError):
    """Raised when a sample stack name is not in the catalog."""

    def __init__(self, sample: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown sample stack: {sample}",
            details={"sample": sample, "available": available},
        )
