"""Logging setup for declaration and provisioning code."""

from samples_iac.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
