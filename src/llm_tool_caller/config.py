"""
Environment-driven configuration for hosts embedding the registry.

Values are read from the process environment after loading a ``.env`` file
(if present):

    LLM_TOOL_CALLER_LOG_LEVEL   logging level name or number (default WARNING)
    LLM_TOOL_CALLER_PRETTY      pretty-print JSON output: 1/true/yes/on
    OPENAI_API_KEY, ANTHROPIC_API_KEY, GEMINI_API_KEY
                                credentials for LLM-driven hosts
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Mapping, Optional

from dotenv import load_dotenv

__all__ = ["Settings", "Provider", "configure_logging", "get_api_key", "ENV_PREFIX"]

ENV_PREFIX: Final = "LLM_TOOL_CALLER_"
_TRUTHY: Final = frozenset({"1", "true", "yes", "on"})


class Provider(StrEnum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"


_API_KEY_VARS: Final[dict[Provider, str]] = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.ANTHROPIC: "ANTHROPIC_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
}


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if environ is not None:
        return environ
    load_dotenv()
    return os.environ


def get_api_key(provider: Provider, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the API key for *provider* or raise RuntimeError."""
    try:
        var = _API_KEY_VARS[provider]
    except KeyError:
        raise RuntimeError(f"No API key setting for provider {provider!s}") from None

    key = _environ(environ).get(var)
    if not key:
        raise RuntimeError(f"{var} missing")
    return key


def _parse_level(raw: str) -> int:
    value = raw.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    pretty: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from *environ* (defaults to ``os.environ``).

        Raises:
            ValueError: if the log level is not a known level name or number.
        """
        env = _environ(environ)
        level_raw = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        pretty_raw = env.get(f"{ENV_PREFIX}PRETTY", "")
        return cls(
            log_level=_parse_level(level_raw) if level_raw else cls.log_level,
            pretty=pretty_raw.strip().lower() in _TRUTHY,
        )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("llm_tool_caller").setLevel(settings.log_level)
