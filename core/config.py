"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from core.errors import ConfigurationError

API_KEY_ENV_NAMES: tuple[str, ...] = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_DISHES_PATH = Path(__file__).resolve().parent.parent / "data" / "dishes.json"

_FALSY = {"0", "false", "no", "off"}


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSY


@dataclass(frozen=True)
class GamelleConfig:
    model: str = DEFAULT_MODEL
    ideas_temperature: float = 0.8
    search_temperature: float = 0.2
    search_grounding: bool = True
    dishes_path: Path = DEFAULT_DISHES_PATH

    @classmethod
    def from_env(cls) -> GamelleConfig:
        """Build a config from GAMELLE_* environment variables."""
        dishes_path = os.environ.get("GAMELLE_DISHES_PATH", "").strip()
        return cls(
            model=os.environ.get("GAMELLE_MODEL", "").strip() or DEFAULT_MODEL,
            ideas_temperature=_float_env("GAMELLE_IDEAS_TEMPERATURE", 0.8),
            search_temperature=_float_env("GAMELLE_SEARCH_TEMPERATURE", 0.2),
            search_grounding=_bool_env("GAMELLE_SEARCH_GROUNDING", True),
            dishes_path=Path(dishes_path) if dishes_path else DEFAULT_DISHES_PATH,
        )
