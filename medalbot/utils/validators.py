"""
Steam ID validation for the steamid command.

Validation returns a tagged result instead of raising so the caller can decide
how to report the failure.
"""

import re
from dataclasses import dataclass
from typing import Optional

REMOVE_SENTINEL = "0"

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class IdentifierCheck:
    """Outcome of validating a user-supplied Steam ID."""
    ok: bool
    value: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_removal(self) -> bool:
        return self.ok and self.value == REMOVE_SENTINEL


def validate_steam_id(raw: Optional[str]) -> IdentifierCheck:
    """Accept ASCII decimal digits only, ignoring surrounding whitespace."""
    if raw is None:
        return IdentifierCheck(ok=False, reason="missing")

    candidate = raw.strip()
    if not candidate:
        return IdentifierCheck(ok=False, reason="empty")
    if not _DIGITS.fullmatch(candidate):
        return IdentifierCheck(ok=False, value=candidate, reason="not_numeric")

    return IdentifierCheck(ok=True, value=candidate)
