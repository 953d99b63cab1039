"""Tests for resource descriptor models."""

import pytest
from pydantic import ValidationError

from samples_iac.core.descriptors import (
    ParameterEntry,
    Queue,
    QueueTarget,
    SecretDescriptor,
    SecretGeneration,
    Subscription,
    Topic,
    UrlTarget,
    parse_descriptor,
    physical_name,
)
from samples_iac.core.exceptions import ConfigurationError, SecretTemplateConflictError


class TestParameterEntry:
    """Tests for ParameterEntry."""

    def test_defaults(self) -> None:
        """Tier defaults to Standard and description is optional."""
        entry = ParameterEntry(logical_id="Message", path="/config/app/message", value="hello")
        assert entry.kind == "parameter"
        assert entry.tier == "Standard"
        assert entry.description is None

    def test_logical_id_required(self) -> None:
        """Empty logical ids are rejected."""
        with pytest.raises(ValidationError):
            ParameterEntry(logical_id="", path="/config/app/message", value="hello")

    def test_logical_id_without_dots(self) -> None:
        """Dots are reserved for qualified `<stackId>.<logicalId>` names."""
        with pytest.raises(ValidationError):
            Queue(logical_id="b.c", queue_name="queue")

    def test_frozen(self) -> None:
        """Descriptors cannot be mutated after construction."""
        entry = ParameterEntry(logical_id="Message", path="/config/app/message", value="hello")
        with pytest.raises(ValidationError):
            entry.value = "changed"  # type: ignore[misc]


class TestSecretGeneration:
    """Tests for the secret generation rule."""

    def test_generated_key_must_not_be_in_template(self) -> None:
        """A generated field may not overwrite a literal template key."""
        with pytest.raises(SecretTemplateConflictError) as exc_info:
            SecretGeneration(generate_key="password", template={"password": "literal"})

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.details["generate_key"] == "password"

    def test_build_body_merges_template(self) -> None:
        """Generated value is added next to the template fields."""
        generation = SecretGeneration(generate_key="password", template={"username": "user"})
        assert generation.build_body("s3cret") == {"username": "user", "password": "s3cret"}

    def test_password_length_bounds(self) -> None:
        """Password length must be a sensible value."""
        with pytest.raises(ValidationError):
            SecretGeneration(generate_key="password", password_length=4)

    def test_secret_descriptor_wraps_generation(self) -> None:
        """SecretDescriptor carries its generation rule."""
        secret = SecretDescriptor(
            logical_id="Secret",
            secret_name="/secrets/app",
            generation=SecretGeneration(generate_key="password", template={"username": "user"}),
        )
        assert secret.kind == "secret"
        assert secret.generation.password_length == 32


class TestDeliveryTargets:
    """Tests for subscription targets."""

    def test_queue_target_protocol(self) -> None:
        assert QueueTarget(queue_id="Queue").protocol == "sqs"

    @pytest.mark.parametrize(
        "url,protocol",
        [
            ("https://abcd1234.ngrok.io/testTopic", "https"),
            ("http://localhost:8080/testTopic", "http"),
        ],
    )
    def test_url_target_protocol_follows_scheme(self, url: str, protocol: str) -> None:
        assert UrlTarget(url=url).protocol == protocol

    @pytest.mark.parametrize("url", ["ftp://example.com/topic", "not-a-url", "https://"])
    def test_url_target_rejects_non_http(self, url: str) -> None:
        with pytest.raises(ValidationError):
            UrlTarget(url=url)

    def test_subscription_target_discriminated_by_type(self) -> None:
        """Dict targets are parsed into the matching variant."""
        subscription = Subscription(
            logical_id="Sub",
            topic_id="Topic",
            target={"type": "url", "url": "https://example.com/hook"},
        )
        assert isinstance(subscription.target, UrlTarget)


class TestResourceDescriptorUnion:
    """Tests for the tagged union of descriptors."""

    def test_parse_round_trip_by_kind(self) -> None:
        """Dumped descriptors parse back into the same variant."""
        queue = Queue(logical_id="Queue", queue_name="stack-queue")
        parsed = parse_descriptor(queue.model_dump())
        assert isinstance(parsed, Queue)
        assert parsed == queue

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_descriptor({"kind": "bucket", "logical_id": "Bucket"})

    def test_physical_names(self) -> None:
        """Physical names are the provider-assigned names."""
        topic = Topic(logical_id="Topic", topic_name="snsSpring")
        subscription = Subscription(
            logical_id="Sub", topic_id="Topic", target=QueueTarget(queue_id="Queue")
        )

        assert physical_name(topic) == "snsSpring"
        assert physical_name(Queue(logical_id="Q", queue_name="stack-q")) == "stack-q"
        assert physical_name(
            ParameterEntry(logical_id="P", path="/config/app/key", value="v")
        ) == "/config/app/key"
        assert physical_name(subscription, {"Topic": "snsSpring"}) == "snsSpring:Sub"
