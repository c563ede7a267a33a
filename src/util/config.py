import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

CONTRIBUTE_URL = "https://github.com/dvkndn/otf.show/issues/1"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class CatalogSettings:
    """
    Runtime settings for the catalog, read from the environment.

    Attributes:
        log_level: Console log level
        log_file: Optional path for a rotating log file
        strict: Treat dangling references as fatal at startup
        quiet_audit: Log dangling references at DEBUG instead of WARNING
        contribute_url: Link shown in the UI header
    """
    log_level: str = "INFO"
    log_file: Optional[str] = None
    strict: bool = False
    quiet_audit: bool = False
    contribute_url: str = CONTRIBUTE_URL

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """Factory: loads .env (if present) then reads CATALOG_* variables."""
        load_dotenv()
        return cls(
            log_level=os.getenv("CATALOG_LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("CATALOG_LOG_FILE") or None,
            strict=_env_flag("CATALOG_STRICT"),
            quiet_audit=_env_flag("CATALOG_QUIET_AUDIT"),
            contribute_url=os.getenv("CATALOG_CONTRIBUTE_URL", CONTRIBUTE_URL),
        )
