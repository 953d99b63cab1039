"""
Infrastructure constants for the sample applications.

Contains parameter namespaces, resource names, and provider defaults.
"""

from typing import Final

# Parameter Store
PARAMETER_NAMESPACE: Final[str] = "/config"
DEFAULT_APP_NAME: Final[str] = "spring"

SAMPLE_PARAMETERS: Final[dict[str, str]] = {
    "message": "Spring-cloud-aws value!",
    "httpUrl": "external-website.url",
}

# Secrets Manager
SAMPLE_SECRET_NAME: Final[str] = "/secrets/spring-cloud-aws-sample-app"
SAMPLE_SECRET_TEMPLATE: Final[dict[str, str]] = {"username": "sample-user"}
SAMPLE_SECRET_GENERATED_KEY: Final[str] = "password"

SECRET_DEFAULTS: Final[dict[str, int]] = {
    "password_length": 32,
    "recovery_window_in_days": 0,  # Immediate deletion (samples only)
}

# SNS
SAMPLE_TOPIC_NAME: Final[str] = "snsSpring"
SAMPLE_TOPIC_QUEUE_NAME: Final[str] = "spring-aws"

# SQS queues derived as <stackId>-<suffix>
QUEUE_SUFFIXES: Final[tuple[str, ...]] = (
    "sample-queue",
    "reply-queue",
)

QUEUE_DEFAULTS: Final[dict[str, int]] = {
    "visibility_timeout_seconds": 30,
    "message_retention_seconds": 345600,  # 4 days
}

# CloudFormation resource types used in rendered output
RESOURCE_TYPES: Final[dict[str, str]] = {
    "parameter": "AWS::SSM::Parameter",
    "secret": "AWS::SecretsManager::Secret",
    "topic": "AWS::SNS::Topic",
    "subscription": "AWS::SNS::Subscription",
    "queue": "AWS::SQS::Queue",
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "samples-iac",
    "ManagedBy": "pulumi",
}
