from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide settings, read once at startup and passed to the app factory."""
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        port = env.get("PORT")
        try:
            port_num = int(port) if port else DEFAULT_PORT
        except ValueError as e:
            raise ValueError(f"PORT must be an integer, got {port!r}") from e
        return cls(port=port_num, host=env.get("HOST") or DEFAULT_HOST)
