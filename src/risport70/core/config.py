"""Client configuration.

Centralizes the environment variables (pydantic-settings) the CLI and
`RisPort70.from_settings()` read. The client itself takes plain arguments, so
library callers never need a `.env`.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import set_key
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from risport70.core.domain.enums import StripMode

APP_NAME = "risport70"
DEFAULT_PORT = 8443
DEFAULT_TIMEOUT_MS = 8000
DEFAULT_NAMESPACE_PREFIX = "ns1:"
SERVICE_PATH = "/realtimeservice2/services/RISService70"


def get_user_config_dir() -> Path:
    """Per-user config directory (`~/.config/risport70`, `%APPDATA%\\risport70`, ...)."""

    return Path(typer.get_app_dir(APP_NAME))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Set `values` in the user's global `.env`, creating it if needed.

    Keys are updated in place; other lines and comments are left untouched.
    `None` values are skipped.
    """

    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text(f"# {APP_NAME} user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is None:
            continue
        set_key(env_path, key, value, quote_mode="never")
    return env_path


class RisPortSettings(BaseSettings):
    """Connection settings for a CUCM RISPort70 endpoint.

    The legacy demo variables (`CUCM`, `UCUSER`, `UCPASS`) are accepted as
    fallbacks for host/user/password.
    """

    model_config = SettingsConfigDict(
        env_prefix="RISPORT70_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    host: str = Field(
        default="",
        validation_alias=AliasChoices("RISPORT70_HOST", "CUCM"),
        description="CUCM publisher/subscriber hostname or IP.",
    )
    user: str = Field(
        default="",
        validation_alias=AliasChoices("RISPORT70_USER", "UCUSER"),
        description="Application user with the Standard CCM Admin Users role.",
    )
    password: str = Field(
        default="",
        validation_alias=AliasChoices("RISPORT70_PASSWORD", "UCPASS"),
    )
    port: int = Field(default=DEFAULT_PORT, gt=0, le=65535)
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Per-request timeout (milliseconds).",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify the server certificate. CUCM often ships self-signed ones.",
    )
    namespace_prefix: str = Field(
        default=DEFAULT_NAMESPACE_PREFIX,
        description="Prefix removed from responses; empty disables the strip.",
    )
    strip_mode: StripMode = Field(default=StripMode.LEXICAL)

    def masked(self) -> dict[str, str]:
        """Resolved settings for display, with the password hidden."""

        return {
            "host": self.host or "-",
            "user": self.user or "-",
            "password": "****" if self.password else "-",
            "port": str(self.port),
            "timeout_ms": str(self.timeout_ms),
            "verify_tls": str(self.verify_tls),
            "namespace_prefix": self.namespace_prefix or "(none)",
            "strip_mode": self.strip_mode.value,
        }
