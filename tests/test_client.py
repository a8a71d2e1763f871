"""SkillClient and synthetic requests against an in-process skill."""

import httpx
import pytest

from alice_skill.echo import GREETING, echo
from alice_skill.errors import AliceSkillError
from alice_skill.models.request import InputData, RequestType
from alice_skill.skill import DANGEROUS_CONTEXT_TEXT, Skill
from alice_skill.transport.envelope import build_request, tokenize
from alice_skill.transport.http import SkillClient


def make_client(handler=echo) -> SkillClient:
    app = Skill(logger=lambda e: None).create_app(handler, path="/skill")
    return SkillClient("http://skill.test/skill", transport=httpx.ASGITransport(app=app))


class TestBuildRequest:
    def test_shape(self):
        doc = build_request("Закажи пиццу, пожалуйста!", session_id="s1", user_id="u1", message_id=2)
        assert doc["version"] == "1.0"
        assert doc["session"]["session_id"] == "s1"
        assert doc["session"]["message_id"] == 2
        assert doc["request"]["command"] == "закажи пиццу пожалуйста"
        assert doc["request"]["original_utterance"] == "Закажи пиццу, пожалуйста!"
        assert doc["request"]["type"] == "SimpleUtterance"
        assert doc["request"]["nlu"]["tokens"] == ["закажи", "пиццу", "пожалуйста"]

    def test_button(self):
        doc = build_request("Да", button=True, payload={"answer": "yes"})
        assert doc["request"]["type"] == "ButtonPressed"
        assert doc["request"]["payload"] == {"answer": "yes"}

    def test_decodes_back(self):
        data = InputData.model_validate(build_request("привет", dangerous=True))
        assert data.request.markup.dangerous_context is True
        assert data.request.type == RequestType.SIMPLE_UTTERANCE

    def test_tokenize(self):
        assert tokenize("Улица Льва Толстого, 16") == ["улица", "льва", "толстого", "16"]


class TestSkillClient:
    @pytest.mark.asyncio
    async def test_echo(self):
        client = make_client()
        try:
            output = await client.send(build_request("Привет, Алиса", session_id="s1"))
        finally:
            await client.close()
        assert output.response.text == "привет алиса"
        assert output.session.session_id == "s1"
        assert [b.title for b in output.response.buttons] == ["Хватит"]

    @pytest.mark.asyncio
    async def test_greeting_and_goodbye(self):
        client = make_client()
        try:
            hello = await client.send(build_request("", new=True))
            bye = await client.send(build_request("Хватит"))
        finally:
            await client.close()
        assert hello.response.text == GREETING
        assert bye.response.end_session is True

    @pytest.mark.asyncio
    async def test_ping_and_dangerous(self):
        client = make_client()
        try:
            pong = await client.send(build_request("ping"))
            flagged = await client.send(build_request("что-то плохое", dangerous=True))
        finally:
            await client.close()
        assert pong.response.text == "pong"
        assert pong.response.buttons == []
        assert flagged.response.text == DANGEROUS_CONTEXT_TEXT

    @pytest.mark.asyncio
    async def test_http_error(self):
        def handler(i):
            raise RuntimeError("broken")

        client = make_client(handler)
        try:
            with pytest.raises(AliceSkillError) as exc:
                await client.send(build_request("hi"))
        finally:
            await client.close()
        assert exc.value.code == "http_error"
        assert "500" in str(exc.value)
