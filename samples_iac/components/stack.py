"""
Declared stack component.

Provisions a validated DeclarationSet through the resource family components,
in dependency order: queues, topics with their subscriptions, queue policies,
secrets, parameters.
"""

from dataclasses import dataclass, field

import pulumi
import pulumi_aws as aws

from samples_iac.components.configuration.parameters import ParameterStoreComponent
from samples_iac.components.messaging.queue_policies import QueuePoliciesComponent
from samples_iac.components.messaging.sns_topics import SnsTopicComponent
from samples_iac.components.messaging.sqs_queues import SqsQueuesComponent
from samples_iac.components.security.secrets_manager import SecretsManagerComponent
from samples_iac.core.descriptors import QueueTarget
from samples_iac.core.stack import DeclarationSet


@dataclass
class StackOutputs:
    """Output values of one declared stack, keyed by logical id."""
    queue_urls: dict[str, pulumi.Output[str]] = field(default_factory=dict)
    topic_arns: dict[str, pulumi.Output[str]] = field(default_factory=dict)
    secret_arns: dict[str, pulumi.Output[str]] = field(default_factory=dict)
    parameter_names: dict[str, pulumi.Output[str]] = field(default_factory=dict)

    def flatten(self, prefix: str) -> dict[str, pulumi.Output[str]]:
        """Flat export names such as `<prefix>.queue_url.<logicalId>`."""
        groups = {
            "queue_url": self.queue_urls,
            "topic_arn": self.topic_arns,
            "secret_arn": self.secret_arns,
            "parameter_name": self.parameter_names,
        }
        return {
            f"{prefix}.{group}.{logical_id}": value
            for group, values in groups.items()
            for logical_id, value in values.items()
        }


class DeclaredStackComponent(pulumi.ComponentResource):
    """
    Pulumi rendition of one declaration set.

    A stack with no descriptors creates no child resources. When the stack
    pins a region or account, children use a dedicated AWS provider.
    """

    def __init__(
        self,
        name: str,
        declarations: DeclarationSet,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("samples:stack:DeclaredStack", name, None, opts)

        stack = declarations.stack
        self.declarations = declarations

        self.provider: aws.Provider | None = None
        if stack.region or stack.account:
            self.provider = aws.Provider(
                f"{name}-aws",
                region=stack.region,
                allowed_account_ids=[stack.account] if stack.account else None,
                opts=pulumi.ResourceOptions(parent=self),
            )
            child_opts = pulumi.ResourceOptions(parent=self, providers={"aws": self.provider})
        else:
            child_opts = pulumi.ResourceOptions(parent=self)

        self.queues: SqsQueuesComponent | None = None
        self.topics: dict[str, SnsTopicComponent] = {}
        self.queue_policies: QueuePoliciesComponent | None = None
        self.secrets: SecretsManagerComponent | None = None
        self.parameters: ParameterStoreComponent | None = None

        queues = declarations.of_kind("queue")
        if queues:
            self.queues = SqsQueuesComponent(f"{name}-queues", stack, queues, opts=child_opts)
        queue_resources = self.queues.queues if self.queues else {}

        # Subscriptions are provisioned by their owning topic
        for topic in declarations.of_kind("topic"):
            self.topics[topic.logical_id] = SnsTopicComponent(
                f"{name}-{topic.logical_id}",
                stack,
                topic,
                declarations.subscriptions_for(topic.logical_id),
                queue_resources,
                opts=child_opts,
            )

        subscribers: dict[str, list[pulumi.Output[str]]] = {}
        subscribed: set[tuple[str, str]] = set()
        for binding in declarations.bindings:
            target = binding.target
            if not isinstance(target, QueueTarget) or (target.queue_id, binding.topic_id) in subscribed:
                continue
            subscribed.add((target.queue_id, binding.topic_id))
            subscribers.setdefault(target.queue_id, []).append(
                self.topics[binding.topic_id].topic.arn
            )
        if subscribers:
            self.queue_policies = QueuePoliciesComponent(
                f"{name}-queue-policies", stack, subscribers, queue_resources, opts=child_opts
            )

        secrets = declarations.of_kind("secret")
        if secrets:
            self.secrets = SecretsManagerComponent(f"{name}-secrets", stack, secrets, opts=child_opts)

        parameters = declarations.of_kind("parameter")
        if parameters:
            self.parameters = ParameterStoreComponent(
                f"{name}-parameters", stack, parameters, opts=child_opts
            )

        pulumi.log.info(f"Declared {len(declarations)} resources for stack {stack.stack_id}")

        outputs = self.get_outputs()
        self.register_outputs({
            "queue_urls": outputs.queue_urls,
            "topic_arns": outputs.topic_arns,
            "secret_arns": outputs.secret_arns,
            "parameter_names": outputs.parameter_names,
        })

    def get_outputs(self) -> StackOutputs:
        """Get output values of every provisioned resource family."""
        return StackOutputs(
            queue_urls=self.queues.get_outputs().queue_urls if self.queues else {},
            topic_arns={k: t.get_outputs().topic_arn for k, t in self.topics.items()},
            secret_arns=self.secrets.get_secret_arns() if self.secrets else {},
            parameter_names=self.parameters.get_parameter_names() if self.parameters else {},
        )
