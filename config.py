
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass
class Settings:
    """Runtime configuration for the catalog client and MCP server."""

    base_url: str = "https://localhost"
    username: Optional[str] = None
    password: Optional[str] = None
    tenant: str = "vsphere.local"
    token: Optional[str] = None
    verify_ssl: bool = True
    timeout: float = 30.0
    default_limit: int = 1000
    host: str = "127.0.0.1"
    port: int = 8085
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.getenv("VRA_BASE_URL", cls.base_url),
            username=os.getenv("VRA_USERNAME"),
            password=os.getenv("VRA_PASSWORD"),
            tenant=os.getenv("VRA_TENANT", cls.tenant),
            token=os.getenv("VRA_TOKEN"),
            verify_ssl=_env_bool("VRA_VERIFY_SSL", cls.verify_ssl),
            timeout=float(os.getenv("VRA_TIMEOUT", str(cls.timeout))),
            default_limit=int(os.getenv("VRA_DEFAULT_LIMIT", str(cls.default_limit))),
            host=os.getenv("MCP_HOST", cls.host),
            port=int(os.getenv("MCP_PORT", str(cls.port))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).lower(),
        )
