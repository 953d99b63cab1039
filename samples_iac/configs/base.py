"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass, field

from samples_iac.configs.constants import DEFAULT_APP_NAME


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        stack_id: Identifier prefix for stack-derived resource names
        environment: Deployment environment (dev, staging, prod)
        app_name: Application segment of parameter paths
        samples: Sample stacks to deploy, by catalog name
        sns_endpoint_url: Optional HTTP(S) endpoint subscribed to the sample
            topic. Typically a temporary tunnel address, so never assumed stable.
        region: AWS region override, provider default when unset
        log_level: Logging level for declaration code
    """
    stack_id: str
    environment: str
    app_name: str = DEFAULT_APP_NAME
    samples: tuple[str, ...] = field(default_factory=tuple)
    sns_endpoint_url: str | None = None
    region: str | None = None
    log_level: str = "INFO"

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
            "StackId": self.stack_id,
        }
