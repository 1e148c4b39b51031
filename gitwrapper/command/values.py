"""Tagged option values and the option rendering rules."""

from __future__ import annotations

import typing as typ

import msgspec

from .errors import InvalidOptionError


class Flag(msgspec.Struct, frozen=True, tag="flag"):
    """An option rendered without a value, e.g. ``-q``."""


class Value(msgspec.Struct, frozen=True, tag="value"):
    """An option rendered with a separate value token."""

    text: str


FLAG: typ.Final[Flag] = Flag()

type OptionValue = Flag | Value
type StoredOption = OptionValue | tuple[OptionValue, ...]


def validate_option_name(name: object) -> str:
    """Return ``name`` unchanged when it is usable as an option name."""
    if not isinstance(name, str):
        raise InvalidOptionError.bad_name(name)
    return name


def _coerce_scalar(name: str, raw: object) -> OptionValue:
    """Normalise a single option value."""
    if isinstance(raw, Flag | Value):
        return raw
    if raw is True:
        return FLAG
    if raw is False:
        raise InvalidOptionError.false_value(name)
    if isinstance(raw, str):
        return Value(raw)
    if isinstance(raw, int):
        return Value(str(raw))
    raise InvalidOptionError.bad_value(name, raw)


def coerce_option_value(name: str, raw: object) -> StoredOption:
    """Normalise ``raw`` into a :data:`StoredOption` for option ``name``.

    ``True`` marks a flag, strings and integers become :class:`Value`
    instances, and lists or tuples describe an option repeated once per
    entry.
    """
    if isinstance(raw, list | tuple):
        return tuple(_coerce_scalar(name, entry) for entry in raw)
    return _coerce_scalar(name, raw)


def iter_values(stored: StoredOption) -> tuple[OptionValue, ...]:
    """Return ``stored`` as a tuple, wrapping single values."""
    if isinstance(stored, tuple):
        return stored
    return (stored,)


def option_prefix(name: str) -> str:
    """Return ``-`` for single-character names and ``--`` otherwise."""
    return "-" if len(name) == 1 else "--"


def option_tokens(name: str, value: OptionValue) -> list[str]:
    """Render one ``name``/``value`` pair into command-line tokens."""
    tokens = [f"{option_prefix(name)}{name}"]
    if isinstance(value, Value):
        tokens.append(value.text)
    return tokens


__all__ = [
    "FLAG",
    "Flag",
    "OptionValue",
    "StoredOption",
    "Value",
    "coerce_option_value",
    "iter_values",
    "option_prefix",
    "option_tokens",
    "validate_option_name",
]
