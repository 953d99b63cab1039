"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from samples_iac.configs.base import EnvironmentConfig
from samples_iac.configs.constants import DEFAULT_APP_NAME


def get_config(available_samples: tuple[str, ...] = ()) -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Args:
        available_samples: Samples deployed when `samples` is not configured

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
    """
    config = pulumi.Config()

    samples = config.get_object("samples")

    return EnvironmentConfig(
        # Pulumi stack names may contain dots; stack ids may not
        stack_id=config.get("stack_id") or pulumi.get_stack().replace(".", "-"),
        environment=config.require("environment"),
        app_name=config.get("app_name") or DEFAULT_APP_NAME,
        samples=tuple(samples) if samples else tuple(available_samples),
        sns_endpoint_url=config.get("sns_endpoint_url"),
        region=pulumi.Config("aws").get("region"),
        log_level=config.get("log_level") or "INFO",
    )
