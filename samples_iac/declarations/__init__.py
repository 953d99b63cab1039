"""
Sample application declarations.

Modules:
- parameter_store: SSM parameters
- secrets_manager: Secret with a generated field
- sns: Topic with queue and URL subscriptions
- sqs: Stack-scoped queues
"""

from samples_iac.declarations.catalog import SAMPLE_STACKS, build_sample, empty_stack
from samples_iac.declarations.parameter_store import declare_parameters, parameter_store_stack
from samples_iac.declarations.secrets_manager import declare_secret, secrets_manager_stack
from samples_iac.declarations.sns import declare_topic, declare_topic_queue, sns_stack
from samples_iac.declarations.sqs import declare_queues, sqs_stack

__all__ = [
    "SAMPLE_STACKS",
    "build_sample",
    "declare_parameters",
    "declare_queues",
    "declare_secret",
    "declare_topic",
    "declare_topic_queue",
    "empty_stack",
    "parameter_store_stack",
    "secrets_manager_stack",
    "sns_stack",
    "sqs_stack",
]
