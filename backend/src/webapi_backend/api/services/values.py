"""Constant value lookups served by the values endpoints."""

from __future__ import annotations

VALUES: tuple[str, ...] = ("Arifur", "Rahman", "sazal")
ADMIN_VALUE = "I am admin"


class ValueNotFoundError(LookupError):
    """Raised when a value position is outside the known sequence."""


class ValuesService:
    """Stateless access to the fixed values sequence."""

    def list_values(self) -> list[str]:
        return list(VALUES)

    def get_value(self, position: int) -> str:
        """Return the value at ``position``.

        Negative positions are rejected rather than counted from the end.
        """

        if not 0 <= position < len(VALUES):
            raise ValueNotFoundError(position)
        return VALUES[position]

    def admin_value(self) -> str:
        return ADMIN_VALUE
