"""
SQS queues component.

Creates one queue per Queue descriptor of a stack.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from samples_iac.core.descriptors import Queue
from samples_iac.core.stack import Stack
from samples_iac.utils.tags import create_tags, merge_tags


@dataclass
class SqsOutputs:
    """Output values from SQS queues component, keyed by logical id."""
    queue_urls: dict[str, pulumi.Output[str]]
    queue_arns: dict[str, pulumi.Output[str]]


class SqsQueuesComponent(pulumi.ComponentResource):
    """SQS queues declared by one stack."""

    def __init__(
        self,
        name: str,
        stack: Stack,
        queues: Sequence[Queue],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("samples:messaging:SqsQueues", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.queues: dict[str, aws.sqs.Queue] = {}
        for queue in queues:
            self.queues[queue.logical_id] = aws.sqs.Queue(
                stack.namer.component_name(queue.logical_id),
                name=queue.queue_name,
                visibility_timeout_seconds=queue.visibility_timeout_seconds,
                message_retention_seconds=queue.message_retention_seconds,
                tags=merge_tags(create_tags(stack.environment, queue.queue_name), stack.tags),
                opts=child_opts,
            )

        outputs = self.get_outputs()
        self.register_outputs({
            "queue_urls": outputs.queue_urls,
            "queue_arns": outputs.queue_arns,
        })

    def get_outputs(self) -> SqsOutputs:
        """Get SQS queue output values."""
        return SqsOutputs(
            queue_urls={logical_id: q.url for logical_id, q in self.queues.items()},
            queue_arns={logical_id: q.arn for logical_id, q in self.queues.items()},
        )
