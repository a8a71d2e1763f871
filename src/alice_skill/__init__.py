"""
alice-skill — Yandex Alice webhook adapter for Python.

Decodes Alice requests (named entities included), answers health-check pings
and flagged utterances, and hands everything else to your handler.
"""

from alice_skill.skill import Skill, SkillReply, SkillHandler
from alice_skill.codec import decode_input, encode_output
from alice_skill.config import Settings, get_settings
from alice_skill.errors import (
    AliceSkillError,
    DecodeError,
    TypeMismatchError,
    ValueShapeError,
    UnknownZoneError,
    HandlerError,
    SerializationError,
    UnexpectedFault,
)
from alice_skill.models.entities import EntityType, RequestEntity, ValueDateTime, ValueFIO, ValueGeo
from alice_skill.models.request import InputData, Request, RequestType, Session
from alice_skill.models.response import Button, OutputData, Response, new_output, new_response

__version__ = "0.1.0"
__all__ = [
    "Skill",
    "SkillReply",
    "SkillHandler",
    "decode_input",
    "encode_output",
    "Settings",
    "get_settings",
    "AliceSkillError",
    "DecodeError",
    "TypeMismatchError",
    "ValueShapeError",
    "UnknownZoneError",
    "HandlerError",
    "SerializationError",
    "UnexpectedFault",
    "EntityType",
    "RequestEntity",
    "ValueDateTime",
    "ValueFIO",
    "ValueGeo",
    "InputData",
    "Request",
    "RequestType",
    "Session",
    "Button",
    "OutputData",
    "Response",
    "new_output",
    "new_response",
]
