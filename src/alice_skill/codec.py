"""
Wire codec — raw request bytes to InputData, OutputData to response bytes.
"""

import json
from typing import Any, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from alice_skill.errors import DecodeError, SerializationError, describe_validation_error
from alice_skill.models.literals import NumberLiteral
from alice_skill.models.request import InputData
from alice_skill.models.response import OutputData


def decode_input(body: Union[bytes, str]) -> InputData:
    """Decode a webhook request body. Raises DecodeError."""
    try:
        # NumberLiteral keeps the text of non-integer literals (16.0 vs 16)
        doc = json.loads(body, parse_float=NumberLiteral)
    except ValueError as e:
        raise DecodeError(f"Malformed JSON: {e}") from e
    if not isinstance(doc, dict):
        raise DecodeError(f"Request body must be a JSON object, got {type(doc).__name__}")
    try:
        return InputData.model_validate(doc)
    except ValidationError as e:
        raise DecodeError(describe_validation_error(e), {"errors": e.errors(include_url=False)}) from e


def encode_output(output: Any) -> bytes:
    """Serialize a response envelope as compact UTF-8 JSON. Raises SerializationError."""
    if not isinstance(output, OutputData):
        raise SerializationError(f"Expected OutputData, got {type(output).__name__}")
    try:
        return output.model_dump_json().encode("utf-8")
    except PydanticSerializationError as e:
        raise SerializationError(f"Unable to encode response: {e}") from e
