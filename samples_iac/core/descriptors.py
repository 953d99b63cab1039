"""
Resource descriptors.

A descriptor is a static, literal record describing the desired configuration
of one cloud resource. All variants share a `kind` discriminator and are
combined into the `ResourceDescriptor` tagged union, so consumers dispatch on
`descriptor.kind` instead of relying on subclass behaviour.

Dependencies: pydantic
System role: Data model for declaration sets
"""

from typing import Annotated, Literal, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from samples_iac.configs.constants import QUEUE_DEFAULTS, SECRET_DEFAULTS
from samples_iac.core.exceptions import SecretTemplateConflictError


class Descriptor(BaseModel):
    """Fields shared by every descriptor variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    logical_id: str = Field(
        min_length=1,
        pattern=r"^[^.]+$",
        description="Identifier unique within the owning stack, without dots",
    )


class ParameterEntry(Descriptor):
    """SSM parameter holding a literal string value."""

    kind: Literal["parameter"] = "parameter"
    path: str = Field(min_length=1, description="Parameter name, e.g. /config/app/key")
    value: str
    description: str | None = None
    tier: Literal["Standard", "Advanced"] = "Standard"


class SecretGeneration(BaseModel):
    """
    Rule for producing a secret body.

    The provider generates a random value for `generate_key`; every other
    field of the JSON body comes from `template` unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    generate_key: str = Field(min_length=1)
    template: dict[str, str] = Field(default_factory=dict)
    password_length: int = Field(default=SECRET_DEFAULTS["password_length"], ge=8, le=4096)
    exclude_punctuation: bool = False

    @model_validator(mode="after")
    def _check_key_not_in_template(self) -> "SecretGeneration":
        if self.generate_key in self.template:
            raise SecretTemplateConflictError(self.generate_key)
        return self

    def build_body(self, generated_value: str) -> dict[str, str]:
        """Secret JSON body with the generated value filled in."""
        return {**self.template, self.generate_key: generated_value}


class SecretDescriptor(Descriptor):
    """Secrets Manager secret with one generated field."""

    kind: Literal["secret"] = "secret"
    secret_name: str = Field(min_length=1)
    description: str | None = None
    generation: SecretGeneration


class Topic(Descriptor):
    """SNS topic."""

    kind: Literal["topic"] = "topic"
    topic_name: str = Field(min_length=1)
    display_name: str | None = None


class QueueTarget(BaseModel):
    """Delivery to a queue declared in the same stack, by logical id."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["queue"] = "queue"
    queue_id: str = Field(min_length=1)
    raw_message_delivery: bool = False

    @property
    def protocol(self) -> str:
        return "sqs"


class UrlTarget(BaseModel):
    """Delivery to a literal HTTP(S) endpoint."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["url"] = "url"
    url: str
    raw_message_delivery: bool = False

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Subscription endpoint must be an http(s) URL: {value}")
        return value

    @property
    def protocol(self) -> str:
        return urlparse(self.url).scheme


DeliveryTarget = Annotated[Union[QueueTarget, UrlTarget], Field(discriminator="type")]


class Subscription(Descriptor):
    """Binding from a topic to a delivery target. Owned by its topic."""

    kind: Literal["subscription"] = "subscription"
    topic_id: str = Field(min_length=1)
    target: DeliveryTarget


class Queue(Descriptor):
    """SQS queue."""

    kind: Literal["queue"] = "queue"
    queue_name: str = Field(min_length=1)
    visibility_timeout_seconds: int = Field(
        default=QUEUE_DEFAULTS["visibility_timeout_seconds"], ge=0, le=43200
    )
    message_retention_seconds: int = Field(
        default=QUEUE_DEFAULTS["message_retention_seconds"], ge=60, le=1209600
    )


ResourceDescriptor = Annotated[
    Union[ParameterEntry, SecretDescriptor, Topic, Subscription, Queue],
    Field(discriminator="kind"),
]

DESCRIPTOR_TYPES = (ParameterEntry, SecretDescriptor, Topic, Subscription, Queue)

DESCRIPTOR_ADAPTER: TypeAdapter[ResourceDescriptor] = TypeAdapter(ResourceDescriptor)


def parse_descriptor(data: dict) -> ResourceDescriptor:
    """
    Build a descriptor from its dumped form.

    Args:
        data: Mapping produced by `model_dump()`, including `kind`

    Returns:
        The matching descriptor variant
    """
    return DESCRIPTOR_ADAPTER.validate_python(data)


def physical_name(descriptor: ResourceDescriptor, topic_names: dict[str, str] | None = None) -> str:
    """
    Provider-assigned name of a declared resource.

    Subscriptions have no name of their own and are identified as
    `<topicName>:<logicalId>`.
    """
    if descriptor.kind == "parameter":
        return descriptor.path
    if descriptor.kind == "secret":
        return descriptor.secret_name
    if descriptor.kind == "topic":
        return descriptor.topic_name
    if descriptor.kind == "queue":
        return descriptor.queue_name
    if descriptor.kind == "subscription":
        topic_name = (topic_names or {}).get(descriptor.topic_id, descriptor.topic_id)
        return f"{topic_name}:{descriptor.logical_id}"
    raise AssertionError(f"Unhandled descriptor kind: {descriptor.kind}")
