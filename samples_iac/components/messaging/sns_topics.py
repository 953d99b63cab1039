"""
SNS topic component.

Creates:
- The topic
- One subscription per Subscription descriptor owned by the topic

Queue policies are built per queue by QueuePoliciesComponent, since SQS keeps
a single policy per queue.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from samples_iac.core.descriptors import QueueTarget, Subscription, Topic
from samples_iac.core.exceptions import DanglingReferenceError
from samples_iac.core.stack import Stack
from samples_iac.utils.tags import create_tags, merge_tags


@dataclass
class SnsOutputs:
    """Output values from SNS topic component."""
    topic_arn: pulumi.Output[str]
    subscription_arns: dict[str, pulumi.Output[str]]


class SnsTopicComponent(pulumi.ComponentResource):
    """
    SNS topic with its subscriptions.

    Queue-backed subscriptions resolve their queue from `queues`, which holds
    the queues provisioned for the same stack.
    """

    def __init__(
        self,
        name: str,
        stack: Stack,
        topic: Topic,
        subscriptions: Sequence[Subscription],
        queues: Mapping[str, aws.sqs.Queue],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("samples:messaging:SnsTopic", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.topic = aws.sns.Topic(
            stack.namer.component_name(topic.logical_id),
            name=topic.topic_name,
            display_name=topic.display_name,
            tags=merge_tags(create_tags(stack.environment, topic.topic_name), stack.tags),
            opts=child_opts,
        )

        self.subscriptions: dict[str, aws.sns.TopicSubscription] = {}

        for subscription in subscriptions:
            target = subscription.target

            if isinstance(target, QueueTarget):
                queue = queues.get(target.queue_id)
                if queue is None:
                    raise DanglingReferenceError(
                        subscription.logical_id, target.queue_id, stack.stack_id, expected_kind="queue"
                    )
                endpoint = queue.arn
            else:
                endpoint = target.url

            self.subscriptions[subscription.logical_id] = aws.sns.TopicSubscription(
                stack.namer.component_name(subscription.logical_id),
                topic=self.topic.arn,
                protocol=target.protocol,
                endpoint=endpoint,
                raw_message_delivery=target.raw_message_delivery,
                opts=child_opts,
            )

        self.register_outputs({
            "topic_arn": self.topic.arn,
            "subscription_arns": {k: s.arn for k, s in self.subscriptions.items()},
        })

    def get_outputs(self) -> SnsOutputs:
        """Get SNS topic output values."""
        return SnsOutputs(
            topic_arn=self.topic.arn,
            subscription_arns={k: s.arn for k, s in self.subscriptions.items()},
        )
