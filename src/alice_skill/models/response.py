"""
Response envelope — what the skill answers to Alice.
"""

from typing import Any, Optional

from pydantic import BaseModel, model_serializer

from alice_skill.models.literals import plain_json
from alice_skill.models.request import InputData, Session


class Button(BaseModel):
    title: str = ""
    hide: bool = False
    url: Optional[str] = None
    payload: Optional[Any] = None

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if self.url is None:
            data.pop("url", None)
        if self.payload is None:
            data.pop("payload", None)
        else:
            data["payload"] = plain_json(self.payload)
        return data


class Response(BaseModel):
    text: str = ""
    tts: str = ""
    buttons: list[Button] = []
    end_session: bool = False

    @model_serializer(mode="wrap")
    def _omit_empty_buttons(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if not self.buttons:
            data.pop("buttons", None)
        return data

    def add_button(
        self,
        title: str,
        hide: bool = False,
        url: Optional[str] = None,
        payload: Any = None,
    ) -> Button:
        """Append a button; buttons are sent in the order they were added."""
        button = Button(title=title, hide=hide, url=url or None, payload=payload)
        self.buttons.append(button)
        return button


class OutputData(BaseModel):
    version: str = ""
    session: Session = Session()
    response: Response = Response()


def new_response(text: str, tts: str = "", end_session: bool = False) -> Response:
    """Build a response; ``tts`` falls back to ``text``."""
    return Response(text=text, tts=tts or text, end_session=end_session)


def new_output(input_data: InputData, response: Response) -> OutputData:
    """Wrap a response in an envelope echoing the request's version and session."""
    return OutputData(version=input_data.version, session=input_data.session, response=response)
