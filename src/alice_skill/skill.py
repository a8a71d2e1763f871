"""
Webhook dispatch pipeline.

Per call: decode → ping check → dangerous context check → handler → encode.
Every call ends in one reply: the encoded response with 200, or an empty body
with the status mapped from the failure class. Nothing raised by the handler
reaches the transport.
"""

import logging
from typing import Any, Callable, NamedTuple, Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import Response as HTTPResponse
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from alice_skill.codec import decode_input, encode_output
from alice_skill.config import Settings
from alice_skill.errors import DecodeError, HandlerError, SerializationError, UnexpectedFault
from alice_skill.logging_config import log_skill_error
from alice_skill.models.request import InputData
from alice_skill.models.response import OutputData, new_output, new_response

logger = logging.getLogger(__name__)

PONG_TEXT = "pong"
DANGEROUS_CONTEXT_TEXT = "Не понимаю, о чем вы. Пожалуйста, переформулируйте вопрос."

ErrorLogger = Callable[[Exception], None]
HandlerResult = Union[OutputData, tuple[OutputData, Optional[Union[Exception, str]]]]
SkillHandler = Callable[[InputData], HandlerResult]

STATUS_BY_ERROR: dict[type[Exception], int] = {
    DecodeError: HTTP_400_BAD_REQUEST,
    SerializationError: HTTP_500_INTERNAL_SERVER_ERROR,
    UnexpectedFault: HTTP_500_INTERNAL_SERVER_ERROR,
}


class SkillReply(NamedTuple):
    status_code: int
    body: bytes


class Skill:
    """Alice webhook adapter.

    ``logger`` receives every decode, handler, serialization and unexpected
    error. It is shared by concurrent calls and must be safe to call from
    several threads.
    """

    def __init__(
        self,
        auto_pings: bool = True,
        auto_dangerous_context: bool = True,
        logger: Optional[ErrorLogger] = None,
    ):
        self.auto_pings = auto_pings
        self.auto_dangerous_context = auto_dangerous_context
        self._logger = logger or log_skill_error

    @classmethod
    def from_settings(cls, settings: Settings, logger: Optional[ErrorLogger] = None) -> "Skill":
        return cls(
            auto_pings=settings.auto_pings,
            auto_dangerous_context=settings.auto_dangerous_context,
            logger=logger,
        )

    def set_logger(self, logger: ErrorLogger) -> None:
        self._logger = logger

    def handle(self, body: Optional[bytes], handler: SkillHandler) -> SkillReply:
        """Run one webhook call to completion. Never raises."""
        if not body:
            return self._fail(DecodeError("Empty request body"))
        try:
            return self._run(body, handler)
        except Exception as e:
            fault = UnexpectedFault(f"Unexpected error: {e}")
            fault.__cause__ = e
            return self._fail(fault)

    def create_app(self, handler: SkillHandler, path: str = "/") -> FastAPI:
        """FastAPI app with a single POST webhook route at ``path``."""
        app = FastAPI(title="alice-skill")

        @app.post(path)
        async def webhook(request: Request) -> HTTPResponse:
            body = await request.body()
            reply = await run_in_threadpool(self.handle, body, handler)
            if reply.status_code != HTTP_200_OK:
                return HTTPResponse(status_code=reply.status_code)
            return HTTPResponse(content=reply.body, media_type="application/json")

        return app

    def _run(self, body: bytes, handler: SkillHandler) -> SkillReply:
        try:
            input_data = decode_input(body)
        except DecodeError as e:
            return self._fail(e)

        output = self._respond(input_data, handler)

        try:
            payload = encode_output(output)
        except SerializationError as e:
            return self._fail(e)
        return SkillReply(HTTP_200_OK, payload)

    def _respond(self, input_data: InputData, handler: SkillHandler) -> Any:
        request = input_data.request
        if self.auto_pings and request.is_ping():
            return new_output(input_data, new_response(PONG_TEXT))
        if self.auto_dangerous_context and request.markup.dangerous_context:
            return new_output(input_data, new_response(DANGEROUS_CONTEXT_TEXT))

        result = handler(input_data)
        if isinstance(result, tuple):
            output, error = result
        else:
            output, error = result, None
        if error is not None:
            self._log(_handler_error(error))
        return output

    def _fail(self, error: Exception) -> SkillReply:
        self._log(error)
        return SkillReply(STATUS_BY_ERROR[type(error)], b"")

    def _log(self, error: Exception) -> None:
        try:
            self._logger(error)
        except Exception:
            logger.exception("Skill error logger failed on %r", error)


def _handler_error(error: Union[Exception, str]) -> HandlerError:
    if isinstance(error, HandlerError):
        return error
    wrapped = HandlerError(str(error))
    if isinstance(error, BaseException):
        wrapped.__cause__ = error
    return wrapped
