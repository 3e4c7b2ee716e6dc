"""Clinical priority classes; a lower code means more urgent."""

from enum import IntEnum

from .config import PRIORITY_NAMES


class Priority(IntEnum):
    IMMEDIATE = 1
    EMERGENCY = 2
    URGENT = 3
    MINIMAL = 4

    @property
    def label(self) -> str:
        """Canonical lowercase name used by commands and saved files."""
        return PRIORITY_NAMES[self.value - 1]

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Look up a class by its name, ignoring case and surrounding blanks.

        Raises ``ValueError`` for anything that is not one of the four names.
        """
        key = name.strip().lower()
        try:
            return cls(PRIORITY_NAMES.index(key) + 1)
        except ValueError:
            raise ValueError(f"unknown priority class: {name!r}") from None
