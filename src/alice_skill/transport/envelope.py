"""
Synthetic webhook requests, shaped the way Alice sends them.
"""

import re
import uuid
from typing import Any, Optional

from alice_skill.models.request import (
    InputData,
    Meta,
    Request,
    RequestMarkup,
    RequestNLU,
    RequestType,
    Session,
)

PROTOCOL_VERSION = "1.0"


def tokenize(utterance: str) -> list[str]:
    return re.findall(r"\w+", utterance.lower())


def build_request(
    utterance: str,
    session_id: Optional[str] = None,
    user_id: Optional[str] = None,
    skill_id: str = "",
    message_id: int = 0,
    new: bool = False,
    button: bool = False,
    payload: Any = None,
    dangerous: bool = False,
    locale: str = "ru-RU",
    timezone: str = "UTC",
) -> dict[str, Any]:
    """Build a webhook request as a dict ready to POST."""
    tokens = tokenize(utterance)
    request = InputData(
        version=PROTOCOL_VERSION,
        meta=Meta(locale=locale, timezone=timezone, client_id="alice-skill/cli", interfaces={"screen": {}}),
        session=Session(
            new=new,
            message_id=message_id,
            session_id=session_id or str(uuid.uuid4()),
            skill_id=skill_id,
            user_id=user_id or uuid.uuid4().hex.upper(),
        ),
        request=Request(
            command=" ".join(tokens),
            original_utterance=utterance,
            type=RequestType.BUTTON_PRESSED if button else RequestType.SIMPLE_UTTERANCE,
            markup=RequestMarkup(dangerous_context=dangerous),
            payload=payload,
            nlu=RequestNLU(tokens=tokens),
        ),
    )
    return request.model_dump(mode="json")
