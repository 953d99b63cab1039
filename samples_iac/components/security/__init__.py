"""
Security components.

Components:
- SecretsManagerComponent: Secrets with a provider-generated field
"""

from samples_iac.components.security.secrets_manager import SecretsManagerComponent

__all__ = [
    "SecretsManagerComponent",
]
