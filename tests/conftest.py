import json
from typing import Any

import pytest

SESSION = {
    "new": True,
    "message_id": 4,
    "session_id": "2eac4854-fce721f3-b845abba-20d60",
    "skill_id": "3ad36498-f5rd-4079-a14b-788652932056",
    "user_id": "AC9WC3DF6FCE052E45A4566A48E6B7193774B84814CE49A922E163B8B29881DC",
}

SESSION_JSON = (
    '{"new":true,"message_id":4,"session_id":"2eac4854-fce721f3-b845abba-20d60",'
    '"skill_id":"3ad36498-f5rd-4079-a14b-788652932056",'
    '"user_id":"AC9WC3DF6FCE052E45A4566A48E6B7193774B84814CE49A922E163B8B29881DC"}'
)


def make_request(
    utterance: str = "hi there",
    dangerous: bool = False,
    **request_fields: Any,
) -> dict[str, Any]:
    return {
        "meta": {
            "locale": "ru-RU",
            "timezone": "Europe/Moscow",
            "client_id": "ru.yandex.searchplugin/5.80 (Samsung Galaxy; Android 4.4)",
            "interfaces": {"screen": {}},
        },
        "request": {
            "command": utterance,
            "original_utterance": utterance,
            "type": "SimpleUtterance",
            "markup": {"dangerous_context": dangerous},
            **request_fields,
        },
        "session": dict(SESSION),
        "version": "1.0",
    }


PIZZA_REQUEST = """{
  "meta": {"locale": "ru-RU", "timezone": "Europe/Moscow", "client_id": "test", "interfaces": {"screen": {}}},
  "request": {
    "command": "закажи пиццу на улицу льва толстого 16 на завтра",
    "original_utterance": "закажи пиццу на улицу льва толстого, 16 на завтра",
    "type": "SimpleUtterance",
    "markup": {"dangerous_context": true},
    "payload": {},
    "nlu": {
      "tokens": ["закажи", "пиццу", "на", "льва", "толстого", "16", "на", "завтра"],
      "entities": [
        {"tokens": {"start": 2, "end": 6}, "type": "YANDEX.GEO",
         "value": {"house_number": "16", "street": "льва толстого"}},
        {"tokens": {"start": 3, "end": 5}, "type": "YANDEX.FIO",
         "value": {"first_name": "лев", "last_name": "толстой"}},
        {"tokens": {"start": 5, "end": 6}, "type": "YANDEX.NUMBER", "value": 16},
        {"tokens": {"start": 6, "end": 8}, "type": "YANDEX.DATETIME",
         "value": {"day": 1, "day_is_relative": true}}
      ]
    }
  },
  "session": %s,
  "version": "1.0"
}""" % SESSION_JSON


@pytest.fixture
def pizza_body() -> bytes:
    return PIZZA_REQUEST.encode("utf-8")


def to_body(doc: dict[str, Any]) -> bytes:
    return json.dumps(doc, ensure_ascii=False).encode("utf-8")
