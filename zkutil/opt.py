"""Optional string and boolean values that distinguish "unset" from "empty"."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OptString:
    """An optional string. ``None`` means unset; ``""`` is a valid value."""

    value: str | None = None

    def is_null(self) -> bool:
        """Return whether no value is set."""
        return self.value is None

    def is_empty(self) -> bool:
        """Return whether the value is set to the empty string."""
        return self.value == ""

    def non_empty(self) -> OptString:
        """Return a null optional if the value is empty, otherwise ``self``."""
        return NULL_STRING if self.is_empty() else self

    def or_(self, other: OptString) -> OptString:
        """Return ``self`` unless it is null, in which case return ``other``."""
        return other if self.is_null() else self

    def or_string(self, alt: str) -> OptString:
        """Return ``self`` unless it is null, in which case wrap ``alt``."""
        return OptString(alt) if self.is_null() else self

    def unwrap(self) -> str:
        """Return the value, or an empty string when unset."""
        return "" if self.value is None else self.value

    def to_json(self) -> str:
        """Render the value as a quoted JSON-like string."""
        return f'"{self.unwrap()}"'

    def __str__(self) -> str:
        return self.unwrap()


def not_empty_string(value: str) -> OptString:
    """Wrap ``value``, treating the empty string as unset."""
    return NULL_STRING if value == "" else OptString(value)


@dataclass(frozen=True)
class OptBool:
    """An optional boolean. ``None`` means unset."""

    value: bool | None = None

    def is_null(self) -> bool:
        """Return whether no value is set."""
        return self.value is None

    def or_(self, other: OptBool) -> OptBool:
        """Return ``self`` unless it is null, in which case return ``other``."""
        return other if self.is_null() else self

    def or_bool(self, alt: bool) -> OptBool:
        """Return ``self`` unless it is null, in which case wrap ``alt``."""
        return OptBool(alt) if self.is_null() else self

    def unwrap(self) -> bool:
        """Return the value, or ``False`` when unset."""
        return bool(self.value)

    def to_json(self) -> str:
        """Render the value as a JSON boolean; unset renders as false."""
        return "true" if self.unwrap() else "false"


NULL_STRING = OptString()
NULL_BOOL = OptBool()
TRUE = OptBool(True)
FALSE = OptBool(False)