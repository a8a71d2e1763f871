"""
Skill settings — read from ALICE_SKILL_* environment variables or .env.
"""

import importlib
from functools import lru_cache
from typing import Any, Callable

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from alice_skill.errors import AliceSkillError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ALICE_SKILL_", env_file=".env", extra="ignore")

    # ── Interception ─────────────────────────────────────────────
    auto_pings: bool = Field(default=True)
    auto_dangerous_context: bool = Field(default=True)

    # ── HTTP ─────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080)
    path: str = Field(default="/")

    # ── Runtime ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    handler: str = Field(default="alice_skill.echo:echo")  # module:function

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}{self.path}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def load_handler(ref: str) -> Callable[..., Any]:
    """Import a handler from a ``package.module:function`` reference."""
    module_name, _, attr = ref.partition(":")
    if not module_name or not attr:
        raise AliceSkillError("config_error", f"Handler must look like 'module:function', got {ref!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise AliceSkillError("config_error", f"Cannot import handler module {module_name!r}: {e}") from e
    fn = getattr(module, attr, None)
    if not callable(fn):
        raise AliceSkillError("config_error", f"{ref!r} is not a callable")
    return fn
