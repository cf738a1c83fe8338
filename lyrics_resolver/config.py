from __future__ import annotations

import json
import logging
from dataclasses import dataclass
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS = ("the_lyrics_api", "lyrics_ovh", "lewagon", "lyrist")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lyrics-resolver"
    return Path.home() / ".config" / "lyrics-resolver"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Providers, highest priority first
    providers: tuple[str, ...]
    musixmatch_api_key: str | None

    # HTTP
    request_timeout_s: float
    user_agent: str

    # Whole cascade, 0 disables
    total_budget_s: float


def _split(value: str) -> tuple[str, ...]:
    return tuple(s.strip() for s in value.split(",") if s.strip())


def load_config() -> AppConfig:
    config_dir = _config_dir()
    return AppConfig(
        config_dir=config_dir,
        providers=_load_providers(config_dir),
        musixmatch_api_key=os.getenv("MUSIXMATCH_API_KEY") or None,
        request_timeout_s=float(os.getenv("LYRICS_RESOLVER_TIMEOUT", "10.0")),
        user_agent=os.getenv("LYRICS_RESOLVER_USER_AGENT", "Mozilla/5.0"),
        total_budget_s=float(os.getenv("LYRICS_RESOLVER_TOTAL_BUDGET", "45.0")),
    )


def _load_providers(config_dir: Path) -> tuple[str, ...]:
    # Priority: config.json → LYRICS_RESOLVER_PROVIDERS → built-in order
    cfg_path = config_dir / "config.json"
    if cfg_path.exists():
        try:
            data = json.loads(cfg_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable %s: %s", cfg_path, e)
        else:
            raw = data.get("providers") if isinstance(data, dict) else None
            if isinstance(raw, str):
                raw = _split(raw)
            if isinstance(raw, (list, tuple)):
                providers = tuple(str(p).strip() for p in raw if str(p).strip())
                if providers:
                    return providers
    env_providers = _split(os.getenv("LYRICS_RESOLVER_PROVIDERS", ""))
    if env_providers:
        return env_providers
    return DEFAULT_PROVIDERS


def save_config_providers(providers: list[str] | tuple[str, ...]) -> Path:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data: dict[str, object] = {}
    if cfg_path.exists():
        try:
            data = json.loads(cfg_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Overwriting unreadable %s", cfg_path)
    data["providers"] = [p.strip() for p in providers if p.strip()]
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return cfg_path
