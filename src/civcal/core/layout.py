"""
civcal.core.layout
------------------
Date layouts written as a rendering of the reference moment

    Mon Jan 2 15:04:05 MST 2006

e.g. "2006-01-02", "Jan _2 2006" or "02.01.06 15:04". Only the date part of a
parsed value is kept; time-of-day and zone tokens are checked and dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from .errors import ConstructionError, ParseError
from .time import days_from_fields, days_in_month, fields_from_days, is_leap_year
from .calmath import weekday_of

ISO_LAYOUT = "2006-01-02"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

_MONTH_LONG = "|".join(MONTH_NAMES)
_MONTH_SHORT = "|".join(n[:3] for n in MONTH_NAMES)
_DAY_LONG = "|".join(DAY_NAMES)
_DAY_SHORT = "|".join(n[:3] for n in DAY_NAMES)

# token -> (kind, regex). Order matters: longer tokens first.
_TOKENS: Tuple[Tuple[str, str, str], ...] = (
    ("January", "month_name", rf"(?i:{_MONTH_LONG})"),
    ("Monday", "weekday", rf"(?i:{_DAY_LONG})"),
    ("2006", "year", r"-?\d{4,}"),
    ("-07:00:00", "zone", r"[+-]\d{2}:\d{2}:\d{2}"),
    ("-0700", "zone", r"[+-]\d{4}"),
    ("-07:00", "zone", r"[+-]\d{2}:\d{2}"),
    ("-07", "zone", r"[+-]\d{2}"),
    ("Z07:00:00", "zone", r"Z|[+-]\d{2}:\d{2}:\d{2}"),
    ("Z0700", "zone", r"Z|[+-]\d{4}"),
    ("Z07:00", "zone", r"Z|[+-]\d{2}:\d{2}"),
    ("Z07", "zone", r"Z|[+-]\d{2}"),
    ("Jan", "month_abbr", rf"(?i:{_MONTH_SHORT})"),
    ("Mon", "weekday", rf"(?i:{_DAY_SHORT})"),
    ("MST", "zone", r"[A-Z]{3,5}(?:[+-]\d{1,2})?|[+-]\d{2,4}"),
    ("002", "yday", r"\d{3}"),
    ("__2", "yday", r" {0,2}\d{1,3}"),
    ("_2", "day", r" ?\d{1,2}"),
    ("01", "month", r"\d{2}"),
    ("02", "day", r"\d{2}"),
    ("03", "hour12", r"\d{2}"),
    ("04", "minute", r"\d{2}"),
    ("05", "second", r"\d{2}"),
    ("06", "year2", r"\d{2}"),
    ("15", "hour", r"\d{1,2}"),
    ("PM", "ampm", r"AM|PM"),
    ("pm", "ampm", r"am|pm"),
    ("1", "month", r"\d{1,2}"),
    ("2", "day", r"\d{1,2}"),
    ("3", "hour12", r"\d{1,2}"),
    ("4", "minute", r"\d{1,2}"),
    ("5", "second", r"\d{1,2}"),
)

_FRACTION_RE = re.compile(r"[.,](0+|9+)(?!\d)")

# Tokens that stop being tokens when followed by a lowercase letter ("Monthly").
_WORD_TOKENS = {"Jan", "Mon", "MST"}


@dataclass(frozen=True)
class Chunk:
    text: str
    kind: Optional[str] = None  # None for literals
    pattern: str = ""


def _next_chunk(layout: str, i: int) -> Tuple[Optional[str], str, str, int]:
    """Return (kind, token, pattern, length) for the token at i, kind None if literal."""
    if layout.startswith("_2006", i):
        # "_" stays literal in front of a four-digit year.
        return None, "_", "", 1
    if layout[i] in ".," and (m := _FRACTION_RE.match(layout, i)):
        digits = m.group(1)
        if digits[0] == "0":
            return "fraction", m.group(0), rf"[.,]\d{{{len(digits)}}}", len(m.group(0))
        return "fraction", m.group(0), r"(?:[.,]\d+)?", len(m.group(0))
    for token, kind, pattern in _TOKENS:
        if layout.startswith(token, i):
            after = layout[i + len(token):i + len(token) + 1]
            if token in _WORD_TOKENS and after.islower():
                continue
            return kind, token, pattern, len(token)
    return None, layout[i], "", 1


@lru_cache(maxsize=64)
def compile_layout(layout: str) -> Tuple[Tuple[Chunk, ...], "re.Pattern[str]"]:
    chunks: List[Chunk] = []
    literal = ""
    i = 0
    while i < len(layout):
        kind, token, pattern, n = _next_chunk(layout, i)
        if kind is None:
            literal += token
        else:
            if literal:
                chunks.append(Chunk(literal))
                literal = ""
            chunks.append(Chunk(token, kind, pattern))
        i += n
    if literal:
        chunks.append(Chunk(literal))

    parts = []
    for idx, c in enumerate(chunks):
        if c.kind is None:
            parts.append(re.escape(c.text))
        else:
            parts.append(f"(?P<g{idx}>{c.pattern})")
    # ASCII digits only.
    return tuple(chunks), re.compile("".join(parts), re.ASCII)


def _month_from_name(value: str) -> int:
    v = value.lower()
    for n, name in enumerate(MONTH_NAMES, start=1):
        if name.lower() == v or name[:3].lower() == v:
            return n
    raise ValueError(f"unknown month name {value!r}")


def parse_days(layout: str, text: str) -> int:
    """Epoch day of `text` read with `layout`. Raises ParseError on any mismatch."""
    chunks, regex = compile_layout(layout)
    m = regex.fullmatch(text)
    if m is None:
        raise ParseError(text, layout, "text does not match layout")

    values: Dict[str, int] = {}
    for idx, c in enumerate(chunks):
        if c.kind is None:
            continue
        raw = m.group(f"g{idx}")
        kind = c.kind
        if kind in ("weekday", "zone", "fraction", "ampm"):
            continue
        if kind in ("month_name", "month_abbr"):
            kind, num = "month", _month_from_name(raw)
        else:
            num = int(raw.strip())
        if kind == "year2":
            kind, num = "year", num + (1900 if num >= 69 else 2000)
        if kind in values and values[kind] != num:
            raise ParseError(text, layout, f"conflicting {kind} values")
        values[kind] = num

    if not 0 <= values.get("hour", 0) < 24:
        raise ParseError(text, layout, "hour out of range")
    if not 0 <= values.get("hour12", 12) <= 12:
        raise ParseError(text, layout, "hour out of range")
    if not 0 <= values.get("minute", 0) < 60:
        raise ParseError(text, layout, "minute out of range")
    if not 0 <= values.get("second", 0) < 60:
        raise ParseError(text, layout, "second out of range")

    year = values.get("year", 0)
    month = values.get("month")
    day = values.get("day")

    if "yday" in values:
        yday = values["yday"]
        if not 1 <= yday <= (366 if is_leap_year(year) else 365):
            raise ParseError(text, layout, "day-of-year out of range")
        try:
            jan1 = days_from_fields(year, 1, 1)
        except ConstructionError as e:
            raise ParseError(text, layout, str(e)) from e
        days = jan1 + yday - 1
        f = fields_from_days(days)
        if (month is not None and month != f.month) or (day is not None and day != f.day):
            raise ParseError(text, layout, "day-of-year does not match month/day")
        return days

    month = 1 if month is None else month
    day = 1 if day is None else day
    if not 1 <= month <= 12:
        raise ParseError(text, layout, "month out of range")
    if not 1 <= day <= days_in_month(year, month):
        raise ParseError(text, layout, "day out of range")
    try:
        return days_from_fields(year, month, day)
    except ConstructionError as e:
        raise ParseError(text, layout, str(e)) from e


def _render(token: str, kind: str, days: int) -> str:
    year, month, day = fields_from_days(days)
    if kind == "year":
        return f"-{-year:04d}" if year < 0 else f"{year:04d}"
    if kind == "year2":
        return f"{abs(year) % 100:02d}"
    if kind == "month_name":
        return MONTH_NAMES[month - 1]
    if kind == "month_abbr":
        return MONTH_NAMES[month - 1][:3]
    if kind == "month":
        return f"{month:02d}" if token == "01" else str(month)
    if kind == "day":
        if token == "02":
            return f"{day:02d}"
        if token == "_2":
            return f"{day:2d}"
        return str(day)
    if kind == "yday":
        yday = days - days_from_fields(year, 1, 1) + 1
        return f"{yday:03d}" if token == "002" else f"{yday:3d}"
    if kind == "weekday":
        name = DAY_NAMES[weekday_of(days)]
        return name if token == "Monday" else name[:3]
    # Dates render at midnight UTC.
    if kind == "hour":
        return "00"
    if kind == "hour12":
        return "12"
    if kind in ("minute", "second"):
        return "00" if token in ("04", "05") else "0"
    if kind == "ampm":
        return token.replace("P", "A").replace("p", "a")
    if kind == "fraction":
        return token[0] + "0" * (len(token) - 1) if token[1] == "0" else ""
    if kind == "zone":
        if token.startswith("Z"):
            return "Z"
        if token == "MST":
            return "UTC"
        return {"-07": "+00", "-0700": "+0000", "-07:00": "+00:00"}.get(token, "+00:00:00")
    raise ValueError(f"unhandled layout token {token!r}")


def format_days(layout: str, days: int) -> str:
    chunks, _ = compile_layout(layout)
    out = []
    for c in chunks:
        out.append(c.text if c.kind is None else _render(c.text, c.kind, days))
    return "".join(out)
