"""
SQS queue policies component.

Creates one policy per subscribed queue allowing every topic that delivers to
it. SQS keeps a single policy per queue, so all subscribing topics must share it.
"""

import json
from collections.abc import Mapping, Sequence

import pulumi
import pulumi_aws as aws

from samples_iac.core.exceptions import DanglingReferenceError
from samples_iac.core.stack import Stack


def _queue_policy(args: list[str]) -> str:
    queue_arn, *topic_arns = args
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": "sns.amazonaws.com"},
            "Action": "sqs:SendMessage",
            "Resource": queue_arn,
            "Condition": {"ArnEquals": {"aws:SourceArn": topic_arns}},
        }],
    })


class QueuePoliciesComponent(pulumi.ComponentResource):
    """
    Queue policies for topic deliveries.

    `subscribers` maps a queue logical id to the ARNs of the topics
    subscribing it.
    """

    def __init__(
        self,
        name: str,
        stack: Stack,
        subscribers: Mapping[str, Sequence[pulumi.Output[str]]],
        queues: Mapping[str, aws.sqs.Queue],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("samples:messaging:QueuePolicies", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.policies: dict[str, aws.sqs.QueuePolicy] = {}
        for queue_id, topic_arns in subscribers.items():
            queue = queues.get(queue_id)
            if queue is None:
                raise DanglingReferenceError(name, queue_id, stack.stack_id, expected_kind="queue")

            self.policies[queue_id] = aws.sqs.QueuePolicy(
                stack.namer.component_name(f"{queue_id}-policy"),
                queue_url=queue.url,
                policy=pulumi.Output.all(queue.arn, *topic_arns).apply(_queue_policy),
                opts=child_opts,
            )

        self.register_outputs({
            "policy_ids": {k: p.id for k, p in self.policies.items()},
        })
