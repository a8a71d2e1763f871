"""
Named entity models — YANDEX.DATETIME, YANDEX.FIO, YANDEX.GEO, YANDEX.NUMBER.

An entity keeps its ``value`` undecoded until one of the typed accessors is
called. Asking for the wrong variant raises TypeMismatchError; a value that does
not fit the requested variant raises ValueShapeError.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ValidationError, field_serializer, field_validator

from alice_skill.errors import (
    TypeMismatchError,
    UnknownZoneError,
    ValueShapeError,
    describe_validation_error,
)
from alice_skill.models.literals import is_float_literal, plain_json


class EntityType(str, Enum):
    DATETIME = "YANDEX.DATETIME"
    FIO = "YANDEX.FIO"
    GEO = "YANDEX.GEO"
    NUMBER = "YANDEX.NUMBER"

    @classmethod
    def from_wire(cls, literal: Any) -> "EntityType":
        try:
            return cls(literal)
        except (ValueError, TypeError):
            raise ValueError(f"Unsupported EntityType value: {literal!r}") from None

    def to_wire(self) -> str:
        return self.value


class ValueFIO(BaseModel):
    first_name: str = ""
    patronymic_name: str = ""
    last_name: str = ""


class ValueGeo(BaseModel):
    country: str = ""
    city: str = ""
    street: str = ""
    house_number: str = ""
    airport: str = ""


_DATETIME_FIELDS = ("year", "month", "day", "hour", "minute")


class ValueDateTime(BaseModel):
    """YANDEX.DATETIME value. Each field is either absolute or relative to now."""
    year: Optional[int] = None
    year_is_relative: bool = False
    month: Optional[int] = None
    month_is_relative: bool = False
    day: Optional[int] = None
    day_is_relative: bool = False
    hour: Optional[int] = None
    hour_is_relative: bool = False
    minute: Optional[int] = None
    minute_is_relative: bool = False

    def is_relative(self) -> bool:
        return any(getattr(self, f"{name}_is_relative") for name in _DATETIME_FIELDS)

    def time(self, zone: str, now: Optional[datetime] = None) -> datetime:
        """Resolve to a point in time in ``zone``.

        Relative fields are added to the matching field of ``now``; fields the
        payload leaves out take ``now``'s value. Overflowing fields carry the way
        a plain date constructor would (month 14 is February of next year, day 31
        of February runs into March).
        """
        try:
            tz = ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise UnknownZoneError(zone) from e

        now = datetime.now(tz) if now is None else now.astimezone(tz)
        fields = []
        for name in _DATETIME_FIELDS:
            value = getattr(self, name)
            current = getattr(now, name)
            if value is None:
                fields.append(current)
            elif getattr(self, f"{name}_is_relative"):
                fields.append(current + value)
            else:
                fields.append(value)
        return _compose(tz, *fields)


def _compose(tz: ZoneInfo, year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        start = datetime(year, month, 1, tzinfo=tz)
        return start + timedelta(days=day - 1, hours=hour, minutes=minute)
    except (ValueError, OverflowError) as e:
        raise ValueShapeError(f"YANDEX.DATETIME value out of range: {e}") from e


class TokenSpan(BaseModel):
    """Half-open ``[start, end)`` index range into ``nlu.tokens``."""
    start: int = 0
    end: int = 0


class RequestEntity(BaseModel):
    tokens: TokenSpan = TokenSpan()
    type: EntityType
    value: Any = None

    model_config = {"frozen": True}

    @field_validator("type", mode="before")
    @classmethod
    def _decode_type(cls, v: Any) -> EntityType:
        return EntityType.from_wire(v)

    @field_serializer("value", when_used="json")
    def _encode_value(self, value: Any) -> Any:
        return plain_json(value)

    def is_fio(self) -> bool:
        return self.type == EntityType.FIO

    def is_geo(self) -> bool:
        return self.type == EntityType.GEO

    def is_float(self) -> bool:
        return self.type == EntityType.NUMBER and is_float_literal(self.value)

    def is_int(self) -> bool:
        return self.type == EntityType.NUMBER and not is_float_literal(self.value)

    def is_datetime(self) -> bool:
        return self.type == EntityType.DATETIME

    def fio_value(self) -> ValueFIO:
        if not self.is_fio():
            raise TypeMismatchError(f"Cannot create ValueFIO for entity type {self.type.value}")
        return self._shape(ValueFIO)

    def geo_value(self) -> ValueGeo:
        if not self.is_geo():
            raise TypeMismatchError(f"Cannot create ValueGeo for entity type {self.type.value}")
        return self._shape(ValueGeo)

    def datetime_value(self) -> ValueDateTime:
        if not self.is_datetime():
            raise TypeMismatchError(f"Cannot create ValueDateTime for entity type {self.type.value}")
        return self._shape(ValueDateTime)

    def float_value(self) -> float:
        if not self.is_float():
            kind = ", integer" if self.is_int() else ""
            raise TypeMismatchError(f"Cannot create float for entity type {self.type.value}{kind}")
        return float(self.value)

    def int_value(self) -> int:
        if not self.is_int():
            kind = ", float" if self.is_float() else ""
            raise TypeMismatchError(f"Cannot create integer for entity type {self.type.value}{kind}")
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            raise ValueShapeError(f"YANDEX.NUMBER value is not a number: {value!r}")
        # exponent literals such as 1e5 carry no decimal point
        if isinstance(value, Decimal) and value != value.to_integral_value():
            raise ValueShapeError(f"YANDEX.NUMBER value is not an integer: {value}")
        return int(value)

    def _shape(self, model: type[BaseModel]) -> Any:
        try:
            return model.model_validate(self.value)
        except ValidationError as e:
            raise ValueShapeError(
                f"Malformed {self.type.value} value: {describe_validation_error(e)}"
            ) from e
