"""
HTTP client that talks to a skill webhook the way Alice does.
"""

from typing import Any, Optional

import httpx

from alice_skill.errors import AliceSkillError
from alice_skill.models.response import OutputData

USER_AGENT = "alice-skill/0.1.0"


class SkillClient:
    def __init__(
        self,
        url: str,
        timeout: float = 3.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def send(self, request: dict[str, Any]) -> OutputData:
        resp = await self._client.post(self._url, json=request)
        if resp.status_code >= 400:
            raise AliceSkillError("http_error", f"HTTP {resp.status_code}: {resp.text[:200]}")
        try:
            return OutputData.model_validate(resp.json())
        except ValueError as e:
            raise AliceSkillError("invalid_response", f"Skill returned an invalid response: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()
