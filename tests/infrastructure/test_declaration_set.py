"""Tests for stacks and declaration set validation."""

import pytest

from samples_iac.core.descriptors import (
    ParameterEntry,
    Queue,
    QueueTarget,
    SecretGeneration,
    Subscription,
    Topic,
    UrlTarget,
)
from samples_iac.core.exceptions import (
    ConfigurationError,
    DanglingReferenceError,
    DuplicateLogicalIdError,
    DuplicateParameterPathError,
    InvalidStackError,
)
from samples_iac.core.stack import DeclarationSet, Stack


def _topic() -> Topic:
    return Topic(logical_id="Topic", topic_name="topic")


def _queue_subscription(queue_id: str = "Queue") -> Subscription:
    return Subscription(
        logical_id="QueueSubscription",
        topic_id="Topic",
        target=QueueTarget(queue_id=queue_id),
    )


class TestStack:
    """Tests for the Stack container."""

    def test_empty_identifier_rejected(self) -> None:
        with pytest.raises(InvalidStackError):
            Stack(stack_id="  ")

    def test_dotted_identifier_rejected(self) -> None:
        """Dots separate stack and logical ids in qualified names."""
        with pytest.raises(InvalidStackError):
            Stack("orders.v2")

    def test_namer_uses_stack_id(self, stack: Stack) -> None:
        assert stack.namer.queue_name("orders") == "sample-stack-orders"

    def test_positional_identifier(self) -> None:
        stack = Stack("MyTestStack")
        assert stack.stack_id == "MyTestStack"
        assert stack.environment == "dev"


class TestAssemble:
    """Tests for DeclarationSet.assemble()."""

    def test_empty_stack(self) -> None:
        declarations = DeclarationSet.assemble(Stack("MyTestStack"))
        assert len(declarations) == 0
        assert declarations.bindings == []

    def test_flattens_groups_in_order(self, stack: Stack) -> None:
        """Single descriptors, lists and (topic, subscriptions) tuples are accepted."""
        queue = Queue(logical_id="Queue", queue_name="q")
        declarations = DeclarationSet.assemble(
            stack,
            queue,
            (_topic(), [_queue_subscription()]),
            [ParameterEntry(logical_id="Param", path="/config/app/key", value="v")],
        )

        assert [d.logical_id for d in declarations] == ["Queue", "Topic", "QueueSubscription", "Param"]
        assert "Topic" in declarations
        assert declarations.get("Queue") == queue
        assert declarations.get("Missing") is None

    def test_rejects_non_descriptors(self, stack: Stack) -> None:
        with pytest.raises(TypeError):
            DeclarationSet.assemble(stack, "Queue")

    @pytest.mark.parametrize(
        "nested",
        [
            SecretGeneration(generate_key="password"),
            QueueTarget(queue_id="Queue"),
        ],
    )
    def test_rejects_nested_models(self, stack: Stack, nested) -> None:
        """Models that only appear inside descriptors are not descriptors."""
        with pytest.raises(TypeError):
            DeclarationSet.assemble(stack, [nested])

    def test_duplicate_logical_id(self, stack: Stack) -> None:
        with pytest.raises(DuplicateLogicalIdError) as exc_info:
            DeclarationSet.assemble(
                stack,
                Queue(logical_id="Same", queue_name="a"),
                Topic(logical_id="Same", topic_name="b"),
            )

        assert exc_info.value.details == {"logical_id": "Same", "stack_id": "sample-stack"}

    def test_duplicate_parameter_path(self, stack: Stack) -> None:
        with pytest.raises(DuplicateParameterPathError):
            DeclarationSet.assemble(
                stack,
                ParameterEntry(logical_id="First", path="/config/app/key", value="1"),
                ParameterEntry(logical_id="Second", path="/config/app/key", value="2"),
            )

    def test_same_path_in_different_stacks(self, stack: Stack, other_stack: Stack) -> None:
        """Parameter path uniqueness is scoped to one stack."""
        entry = ParameterEntry(logical_id="Param", path="/config/app/key", value="v")
        DeclarationSet.assemble(stack, entry)
        DeclarationSet.assemble(other_stack, entry)

    def test_dangling_queue_reference(self, stack: Stack) -> None:
        with pytest.raises(DanglingReferenceError) as exc_info:
            DeclarationSet.assemble(stack, _topic(), _queue_subscription("Missing"))

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.details["target_id"] == "Missing"
        assert exc_info.value.details["expected_kind"] == "queue"

    def test_queue_reference_must_be_a_queue(self, stack: Stack) -> None:
        """A queue target pointing at a non-queue descriptor is dangling."""
        with pytest.raises(DanglingReferenceError):
            DeclarationSet.assemble(
                stack,
                _topic(),
                ParameterEntry(logical_id="Queue", path="/config/app/q", value="v"),
                _queue_subscription("Queue"),
            )

    def test_dangling_topic_reference(self, stack: Stack) -> None:
        with pytest.raises(DanglingReferenceError) as exc_info:
            DeclarationSet.assemble(
                stack,
                Subscription(
                    logical_id="Orphan",
                    topic_id="NoTopic",
                    target=UrlTarget(url="https://example.com/hook"),
                ),
            )

        assert exc_info.value.details["expected_kind"] == "topic"

    def test_reference_resolved_regardless_of_order(self, stack: Stack) -> None:
        """The queue may be declared after the subscription that uses it."""
        declarations = DeclarationSet.assemble(
            stack,
            (_topic(), [_queue_subscription()]),
            Queue(logical_id="Queue", queue_name="q"),
        )
        assert len(declarations) == 3


class TestBindings:
    """Tests for topic to target bindings."""

    def test_bindings_follow_subscriptions(self, stack: Stack) -> None:
        url_subscription = Subscription(
            logical_id="UrlSubscription",
            topic_id="Topic",
            target=UrlTarget(url="https://example.com/hook"),
        )
        declarations = DeclarationSet.assemble(
            stack,
            Queue(logical_id="Queue", queue_name="q"),
            (_topic(), [_queue_subscription(), url_subscription]),
        )

        bindings = declarations.bindings
        assert [(b.topic_id, b.subscription_id, b.protocol) for b in bindings] == [
            ("Topic", "QueueSubscription", "sqs"),
            ("Topic", "UrlSubscription", "https"),
        ]
        assert declarations.subscriptions_for("Topic")[1] == url_subscription
        assert declarations.subscriptions_for("Other") == []

    def test_of_kind(self, stack: Stack) -> None:
        declarations = DeclarationSet.assemble(
            stack,
            Queue(logical_id="A", queue_name="a"),
            Queue(logical_id="B", queue_name="b"),
            _topic(),
        )
        assert [q.logical_id for q in declarations.of_kind("queue")] == ["A", "B"]
        assert declarations.of_kind("secret") == []


class TestEquality:
    """Declaration sets compare structurally."""

    def test_equal_when_same_stack_and_descriptors(self, stack: Stack) -> None:
        first = DeclarationSet.assemble(stack, Queue(logical_id="Q", queue_name="q"))
        second = DeclarationSet.assemble(stack, Queue(logical_id="Q", queue_name="q"))
        assert first == second

    def test_not_equal_across_stacks(self, stack: Stack, other_stack: Stack) -> None:
        first = DeclarationSet.assemble(stack, Queue(logical_id="Q", queue_name="q"))
        second = DeclarationSet.assemble(other_stack, Queue(logical_id="Q", queue_name="q"))
        assert first != second
