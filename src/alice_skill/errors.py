"""
Alice skill error types.

Decode/serialize/fault errors end a webhook call with a status code.
Accessor errors (type mismatch, value shape, unknown zone) belong to whoever
called the accessor.
"""

from typing import Any, Optional

from pydantic import ValidationError


def describe_validation_error(exc: ValidationError) -> str:
    """One line per failing field: ``request.type: Value error, ...``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class AliceSkillError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class DecodeError(AliceSkillError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)


class TypeMismatchError(AliceSkillError):
    def __init__(self, message: str):
        super().__init__("type_mismatch", message)


class ValueShapeError(AliceSkillError):
    def __init__(self, message: str):
        super().__init__("malformed_value", message)


class UnknownZoneError(AliceSkillError):
    def __init__(self, zone: str):
        super().__init__("unknown_time_zone", f"Unknown time zone: {zone!r}", {"zone": zone})


class HandlerError(AliceSkillError):
    """Advisory error returned by a skill handler next to a valid response."""

    def __init__(self, message: str):
        super().__init__("handler_error", message)


class SerializationError(AliceSkillError):
    def __init__(self, message: str):
        super().__init__("serialization_error", message)


class UnexpectedFault(AliceSkillError):
    def __init__(self, message: str):
        super().__init__("unexpected_error", message)
