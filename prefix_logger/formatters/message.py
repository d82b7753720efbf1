"""
Message renderers

Two call shapes exist for every level: println-style (values joined by
spaces, newline appended) and printf-style (``%`` substitution, no newline
added). Neither raises; rendering problems end up inline in the text.
"""

from collections.abc import Mapping
from typing import Any, Sequence


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception as e:
        return f"%!(BADVALUE {type(value).__name__}: {e})"


def render_println(args: Sequence[Any]) -> str:
    """
    Join values with single spaces and append a newline.

    Example:
        render_println(("a", 1, None))  # "a 1 None\\n"
    """
    return " ".join(_safe_str(arg) for arg in args) + "\n"


def render_printf(fmt: str, args: Sequence[Any]) -> str:
    """
    Substitute ``args`` into a printf-style format string.

    A single mapping argument fills named placeholders such as ``%(user)s``.
    A malformed format string or mismatched arguments produce the format
    string followed by a ``%!(BADFORMAT ...)`` marker.

    Args:
        fmt: Format string
        args: Positional arguments

    Returns:
        Rendered text, without an added newline
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        values: Any = args[0]
    else:
        values = tuple(args)

    try:
        return fmt % values
    except Exception as e:
        rendered_args = ", ".join(_safe_str(arg) for arg in args)
        return f"{fmt}%!(BADFORMAT {type(e).__name__}: {e}; args=[{rendered_args}])"
