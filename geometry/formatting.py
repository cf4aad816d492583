# geometry/formatting.py
"""
Textual rendering of vectors.

The first character of the format string picks the layout:

==========  ==========================================================
``x y z``   a single component, rest of the string is the number spec
``v``       verbose: unit/other classification, components, magnitude
``m``       compact: ``(x, y, z) |magnitude|``
empty       ``(x, y, z)`` with the default number format
other       whole string used as number spec for each component
==========  ==========================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import config

if TYPE_CHECKING:
    from geometry.vector import Vector


def format_number(value: float, spec: Optional[str] = None) -> str:
    if not spec:
        spec = config.DEFAULT_NUMBER_FORMAT
    return format(value, spec)


def format_vector(v: "Vector", fmt: Optional[str] = None) -> str:
    if not fmt:
        return "({0}, {1}, {2})".format(*(format_number(c) for c in v))

    first = fmt[0].lower()
    rest = fmt[1:]

    if first in ("x", "y", "z"):
        return format_number(v[first], rest)
    if first == "v":
        label = config.UNIT_VECTOR if v.is_unit_vector() else config.OTHER_VECTOR
        return "{0}( x={1}, y={2}, z={3} ){4}{5}".format(
            label,
            format_number(v.x, rest),
            format_number(v.y, rest),
            format_number(v.z, rest),
            config.MAGNITUDE,
            format_number(v.magnitude(), rest),
        )
    if first == "m":
        return "({0}, {1}, {2}) |{3}|".format(
            format_number(v.x, rest),
            format_number(v.y, rest),
            format_number(v.z, rest),
            format_number(v.magnitude(), rest),
        )
    return "({0}, {1}, {2})".format(*(format_number(c, fmt) for c in v))
