"""
SNS sample declarations.

Creates:
- Topic `snsSpring`
- Queue receiving the topic's messages
- Queue-backed subscription, plus a URL-backed subscription when an endpoint
  is supplied (usually a temporary tunnel address for local testing)
"""

from samples_iac.configs.constants import SAMPLE_TOPIC_NAME, SAMPLE_TOPIC_QUEUE_NAME
from samples_iac.core.descriptors import Queue, QueueTarget, Subscription, Topic, UrlTarget
from samples_iac.core.stack import DeclarationSet, Stack

TOPIC_ID = "SnsSpringTopic"
TOPIC_QUEUE_ID = "SnsSpringQueue"


def declare_topic_queue(stack: Stack) -> Queue:
    """Declare the queue subscribed to the sample topic."""
    return Queue(logical_id=TOPIC_QUEUE_ID, queue_name=SAMPLE_TOPIC_QUEUE_NAME)


def declare_topic(
    stack: Stack,
    endpoint_url: str | None = None,
    queue_id: str = TOPIC_QUEUE_ID,
) -> tuple[Topic, list[Subscription]]:
    """
    Declare the sample topic and its subscriptions.

    The queue referenced by `queue_id` must be declared in the same stack.

    Args:
        stack: Owning stack
        endpoint_url: Optional HTTP(S) endpoint to subscribe
        queue_id: Logical id of the subscribed queue

    Returns:
        The topic and its subscriptions
    """
    topic = Topic(
        logical_id=TOPIC_ID,
        topic_name=SAMPLE_TOPIC_NAME,
        display_name=SAMPLE_TOPIC_NAME,
    )

    subscriptions = [
        Subscription(
            logical_id=f"{TOPIC_ID}QueueSubscription",
            topic_id=topic.logical_id,
            target=QueueTarget(queue_id=queue_id),
        ),
    ]

    if endpoint_url:
        subscriptions.append(
            Subscription(
                logical_id=f"{TOPIC_ID}UrlSubscription",
                topic_id=topic.logical_id,
                target=UrlTarget(url=endpoint_url),
            )
        )

    return topic, subscriptions


def sns_stack(stack: Stack, sns_endpoint_url: str | None = None, **_: object) -> DeclarationSet:
    """Declaration set for the SNS sample."""
    return DeclarationSet.assemble(
        stack,
        declare_topic_queue(stack),
        declare_topic(stack, sns_endpoint_url),
    )
