"""Identity of the user performing an action."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Opaque ``(user_id, display_name, email)`` triple supplied by authentication."""

    user_id: str
    display_name: str | None
    email: str | None

    @property
    def name(self) -> str:
        """Return the display name, falling back to the local part of the email."""

        if self.display_name and self.display_name.strip():
            return self.display_name.strip()
        if self.email:
            return self.email.split("@", 1)[0]
        return ""


__all__ = ["Actor"]
