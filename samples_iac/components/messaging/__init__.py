"""
Messaging components.

Components:
- SqsQueuesComponent: Stack-scoped SQS queues
- SnsTopicComponent: SNS topic with queue and URL subscriptions
- QueuePoliciesComponent: One policy per subscribed queue
"""

from samples_iac.components.messaging.sqs_queues import SqsQueuesComponent, SqsOutputs
from samples_iac.components.messaging.sns_topics import SnsTopicComponent, SnsOutputs
from samples_iac.components.messaging.queue_policies import QueuePoliciesComponent

__all__ = [
    "SqsQueuesComponent",
    "SqsOutputs",
    "SnsTopicComponent",
    "SnsOutputs",
    "QueuePoliciesComponent",
]
