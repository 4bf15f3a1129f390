"""Identifier case conversions used by the Dart templates."""

from __future__ import annotations

__all__ = ["pascal_case", "camel_case"]


def _ascii_upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def _ascii_lower(char: str) -> str:
    return char.lower() if "A" <= char <= "Z" else char


def pascal_case(value: str) -> str:
    """Convert a snake_case identifier such as ``forgot_password`` to ``ForgotPassword``.

    The first character and every character following an underscore are
    upper-cased, underscores are dropped and everything else is passed through
    unchanged. Only ASCII letters change case so non-ASCII input survives
    byte-for-byte.
    """

    result: list[str] = []
    capitalize = True
    for char in value:
        if char == "_":
            capitalize = True
        elif capitalize:
            result.append(_ascii_upper(char))
            capitalize = False
        else:
            result.append(char)
    return "".join(result)


def camel_case(value: str) -> str:
    """Return ``value`` in lowerCamelCase, e.g. ``forgotPassword``."""

    pascal = pascal_case(value)
    if not pascal:
        return pascal
    return _ascii_lower(pascal[0]) + pascal[1:]
