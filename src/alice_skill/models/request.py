"""
Request envelope — what Alice posts to the skill webhook.
"""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
    model_serializer,
)

from alice_skill.errors import DecodeError, ValueShapeError, describe_validation_error
from alice_skill.models.entities import RequestEntity
from alice_skill.models.literals import plain_json

PING_UTTERANCE = "ping"


class Meta(BaseModel):
    locale: str = ""
    timezone: str = ""
    client_id: str = ""
    interfaces: Any = None

    model_config = {"frozen": True}


class Session(BaseModel):
    """Session descriptor. Echoed verbatim in the response, unknown keys included."""
    new: bool = False
    message_id: int = Field(default=0, ge=0)
    session_id: str = ""
    skill_id: str = ""
    user_id: str = ""

    model_config = {"frozen": True, "extra": "allow"}

    @model_serializer(mode="wrap")
    def _plain_extras(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        for key, value in (self.model_extra or {}).items():
            data[key] = plain_json(value)
        return data


class RequestType(str, Enum):
    SIMPLE_UTTERANCE = "SimpleUtterance"
    BUTTON_PRESSED = "ButtonPressed"

    @classmethod
    def from_wire(cls, literal: Any) -> "RequestType":
        try:
            return cls(literal)
        except (ValueError, TypeError):
            raise ValueError(f"Unsupported RequestType value: {literal!r}") from None

    def to_wire(self) -> str:
        return self.value


class RequestMarkup(BaseModel):
    dangerous_context: bool = False

    model_config = {"frozen": True}


class RequestNLU(BaseModel):
    tokens: list[str] = []
    entities: list[RequestEntity] = []

    model_config = {"frozen": True}

    def tokens_for(self, entity: RequestEntity) -> list[str]:
        """Words covered by an entity. Spans are not checked at decode time."""
        start, end = entity.tokens.start, entity.tokens.end
        if not 0 <= start <= end <= len(self.tokens):
            raise ValueShapeError(
                f"Token span [{start}, {end}) is outside of {len(self.tokens)} tokens"
            )
        return self.tokens[start:end]


class Request(BaseModel):
    command: str = ""
    original_utterance: str = ""
    type: RequestType = RequestType.SIMPLE_UTTERANCE
    markup: RequestMarkup = RequestMarkup()
    payload: Any = None
    nlu: RequestNLU = RequestNLU()

    model_config = {"frozen": True}

    @field_validator("type", mode="before")
    @classmethod
    def _decode_type(cls, v: Any) -> RequestType:
        return RequestType.from_wire(v)

    @field_serializer("payload", when_used="json")
    def _encode_payload(self, value: Any) -> Any:
        return plain_json(value)

    def is_ping(self) -> bool:
        """Yandex health check."""
        return self.original_utterance == PING_UTTERANCE

    def decode_payload(self, tp: Any) -> Any:
        """Validate the button payload against ``tp`` (a model, list[int], ...)."""
        try:
            return TypeAdapter(tp).validate_python(self.payload)
        except ValidationError as e:
            raise DecodeError(f"Unable to decode request payload: {describe_validation_error(e)}") from e


class InputData(BaseModel):
    version: str = ""
    meta: Meta = Meta()
    session: Session = Session()
    request: Request = Request()

    model_config = {"frozen": True}
