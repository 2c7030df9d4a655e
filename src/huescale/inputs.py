from __future__ import annotations

"""Parsing of textual color/stop pairs and transformation expressions.

Accepted forms::

    "#2D72D2::500"        color and stop ("::", ":" or whitespace)
    "#2D72D2::500, red:600"   several pairs (comma or newline separated)
    "#2D72D2>#238551::500"    transform: reference > target, optional stop
    "#2D72D2>(red, lime)::500"  transform one reference onto many targets
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .color_types import coerce_stop
from .errors import InputParseError, StopPositionError

_SEPARATORS = ("::", ":")
_WHITESPACE = re.compile(r"\s+")
_LIST_SPLIT = re.compile(r"[,\n]")


@dataclass(frozen=True)
class ParsedPair:
    """A color string with an optional stop (``None`` when not given)."""

    color: str
    stop: Optional[int]
    raw: str


@dataclass(frozen=True)
class TransformationRequest:
    """``reference > targets`` with an optional stop for palette generation."""

    reference: str
    targets: Tuple[str, ...]
    stop: Optional[int]


def parse_pair(text: str) -> ParsedPair:
    """Parse one ``color[::stop]`` pair."""
    raw = text
    trimmed = text.strip()
    if not trimmed:
        raise InputParseError(raw, "empty pair")

    color, stop_text = _split_stop(trimmed)
    if not color:
        raise InputParseError(raw, "missing color")
    return ParsedPair(color=color, stop=_parse_stop(stop_text, raw), raw=raw)


def parse_pairs(text: str) -> List[ParsedPair]:
    """Parse comma- or newline-separated pairs; at least one is required.

    Commas inside functional notations such as ``rgb(1, 2, 3)`` are kept.
    """
    parts = [p.strip() for p in _split_top_level(text, _LIST_SPLIT)]
    pairs = [parse_pair(p) for p in parts if p]
    if not pairs:
        raise InputParseError(text, "no valid pairs found in input")
    return pairs


def is_transformation_syntax(text: str) -> bool:
    return ">" in text


def parse_transformation(text: str) -> TransformationRequest:
    """Parse ``ref>target[::stop]`` or ``ref>(t1, t2)[::stop]``."""
    trimmed = text.strip()
    if ">" not in trimmed:
        raise InputParseError(text, "transformation needs '>' between reference and target")
    reference, rest = (s.strip() for s in trimmed.split(">", 1))
    if not reference:
        raise InputParseError(text, "missing reference color")
    if not rest:
        raise InputParseError(text, "missing target color")

    if rest.startswith("("):
        close = rest.rfind(")")
        if close < 0:
            raise InputParseError(text, "unbalanced parentheses in target list")
        inner, tail = rest[1:close], rest[close + 1 :].strip()
        targets = tuple(t.strip() for t in _split_top_level(inner, re.compile(",")) if t.strip())
        stop_text = _stop_suffix(tail, text)
    else:
        target, stop_text = _split_stop(rest)
        targets = (target,) if target else ()

    if not targets:
        raise InputParseError(text, "missing target color")
    return TransformationRequest(reference=reference, targets=targets, stop=_parse_stop(stop_text, text))


def _split_stop(text: str) -> Tuple[str, Optional[str]]:
    """Split ``color`` from a trailing stop using the first separator that applies."""
    for sep in _SEPARATORS:
        if sep in text:
            color, stop = text.rsplit(sep, 1)
            return color.strip(), stop.strip()
    # whitespace stop: the last token outside parentheses, digits only
    parts = [p for p in _split_top_level(text, _WHITESPACE) if p]
    if len(parts) >= 2 and parts[-1].isdigit():
        return text[: len(text.rstrip()) - len(parts[-1])].strip(), parts[-1]
    return text, None


def _stop_suffix(tail: str, raw: str) -> Optional[str]:
    if not tail:
        return None
    for sep in _SEPARATORS:
        if tail.startswith(sep):
            return tail[len(sep) :].strip()
    raise InputParseError(raw, f"unexpected text after target list: '{tail}'")


def _parse_stop(stop_text: Optional[str], raw: str) -> Optional[int]:
    if stop_text is None:
        return None
    if not stop_text:
        raise InputParseError(raw, "missing stop after separator")
    try:
        return coerce_stop(stop_text)
    except StopPositionError as exc:
        raise InputParseError(raw, str(exc)) from exc


def _split_top_level(text: str, pattern: re.Pattern[str]) -> List[str]:
    """Split on ``pattern`` matches that are not inside parentheses."""
    parts: List[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif depth == 0 and pattern.fullmatch(ch):
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


__all__ = [
    "ParsedPair",
    "TransformationRequest",
    "parse_pair",
    "parse_pairs",
    "is_transformation_syntax",
    "parse_transformation",
]
