"""Tests for the static stack resource registry."""

import pytest

from samples_iac.core.exceptions import ConfigurationError
from samples_iac.core.registry import StackResourceRegistry
from samples_iac.core.stack import Stack
from samples_iac.declarations import parameter_store_stack, sns_stack, sqs_stack


@pytest.fixture
def registry() -> StackResourceRegistry:
    return StackResourceRegistry.from_declarations(
        sqs_stack(Stack("first")),
        sqs_stack(Stack("second")),
        sns_stack(Stack("messaging")),
        parameter_store_stack(Stack("config")),
    )


class TestStackResourceRegistry:
    """Tests for StackResourceRegistry."""

    def test_qualified_lookup(self, registry: StackResourceRegistry) -> None:
        assert registry.lookup_physical_resource_id("first.SampleQueue") == "first-sample-queue"
        assert registry.lookup_physical_resource_id("second.SampleQueue") == "second-sample-queue"

    def test_unqualified_lookup_when_unique(self, registry: StackResourceRegistry) -> None:
        assert registry.lookup_physical_resource_id("MessageParameter") == "/config/spring/message"
        assert registry.lookup_physical_resource_id("SnsSpringTopic") == "snsSpring"

    def test_unqualified_lookup_when_ambiguous(self, registry: StackResourceRegistry) -> None:
        """SampleQueue exists in two stacks, so the bare id does not resolve."""
        assert registry.lookup_physical_resource_id("SampleQueue") is None

    def test_unknown_ids(self, registry: StackResourceRegistry) -> None:
        assert registry.lookup_physical_resource_id("Missing") is None
        assert registry.lookup_physical_resource_id("first.Missing") is None

    def test_subscription_physical_id(self, registry: StackResourceRegistry) -> None:
        physical_id = registry.lookup_physical_resource_id("SnsSpringTopicQueueSubscription")
        assert physical_id == "snsSpring:SnsSpringTopicQueueSubscription"

    def test_resources_by_type(self, registry: StackResourceRegistry) -> None:
        queues = registry.resources_by_type("AWS::SQS::Queue")
        assert {q.physical_id for q in queues} == {
            "first-sample-queue",
            "first-reply-queue",
            "second-sample-queue",
            "second-reply-queue",
            "spring-aws",
        }

    def test_stack_names_and_all_resources(self, registry: StackResourceRegistry) -> None:
        assert registry.stack_names == ["first", "second", "messaging", "config"]
        assert len(registry.all_resources()) == 2 + 2 + 3 + 2

    def test_duplicate_stack_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            StackResourceRegistry.from_declarations(sqs_stack(Stack("same")), sqs_stack(Stack("same")))

    def test_qualified_ids_split_into_stack_and_logical_id(self, registry: StackResourceRegistry) -> None:
        """Neither part of a qualified id may contain a dot, so keys never collide."""
        for resource in registry.all_resources():
            stack_id, logical_id = resource.logical_id.split(".")
            assert stack_id in registry.stack_names
            assert registry.lookup_physical_resource_id(f"{stack_id}.{logical_id}") == resource.physical_id
