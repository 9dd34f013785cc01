from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

ENV_PREFIX = "NIMM_"


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 2222
    tick_seconds: float = 1.0
    shutdown_grace_seconds: int = 30
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from `NIMM_*` environment variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str, default: object) -> str:
            return env.get(f"{ENV_PREFIX}{name}", str(default))

        try:
            settings = cls(
                host=_get("HOST", defaults.host),
                port=int(_get("PORT", defaults.port)),
                tick_seconds=float(_get("TICK_SECONDS", defaults.tick_seconds)),
                shutdown_grace_seconds=int(_get("SHUTDOWN_GRACE_SECONDS", defaults.shutdown_grace_seconds)),
                log_level=_get("LOG_LEVEL", defaults.log_level).upper(),
            )
        except ValueError as e:
            raise ValueError(f"Invalid {ENV_PREFIX}* setting: {e}") from e

        settings.validate()
        return settings

    def validate(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        if self.tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {self.tick_seconds}")
        if self.shutdown_grace_seconds < 0:
            raise ValueError(f"shutdown_grace_seconds must be >= 0, got {self.shutdown_grace_seconds}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
