"""
Load-time configuration.

Read once, from the environment, when ``typeserial`` is imported:

    TYPESERIAL_PASSIVE  - do not claim the shared type or any of its
                          capabilities; coexist with whatever is there
    TYPESERIAL_VERBOSE  - warn for every capability left to an earlier
                          definition

Flags accept 1/true/yes/on (case-insensitive). Anything else is off.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


PASSIVE_ENV = "TYPESERIAL_PASSIVE"
VERBOSE_ENV = "TYPESERIAL_VERBOSE"

_TRUTHY_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Negotiation settings.

    Properties:
        passive: Skip all claims (passive coexistence)
        verbose: Emit a CapabilityConflictWarning per skipped capability
    """

    passive: bool = False
    verbose: bool = False


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    value = environ.get(name, "")
    return value.strip().lower() in _TRUTHY_VALUES


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    return Settings(
        passive=_env_flag(environ, PASSIVE_ENV),
        verbose=_env_flag(environ, VERBOSE_ENV),
    )
