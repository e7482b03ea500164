# pycellarrays/core/settings.py
import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """
    Runtime switches shared by every module of the package.
    """
    # If True, precondition checks (empty domains, identity-reindex lengths)
    # are evaluated. Unconditional checks are not affected.
    checks: bool = True
    # If True, the "pycellarrays" logger is set to DEBUG on import.
    debug: bool = False


# Global, editable in one place:
SETTINGS = Settings(
    checks=_env_flag("PYCELLARRAYS_CHECKS", "1"),
    debug=_env_flag("PYCELLARRAYS_DEBUG", "0"),
)
