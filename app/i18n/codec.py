"""
Localized field codec

Collapses the historical wire shapes of a localized field into one
canonical per-track map, and encodes canonical maps back to the wire.

Accepted raw shapes, in priority order:
1. An object keyed by track code -> known tracks copied, missing ones zeroed
2. A string holding a JSON object -> parsed, then handled as (1)
3. Any other string -> flat legacy value, copied to every track
4. None -> every track zeroed

Buttons and statistics additionally accept the pre-localization object
(``{"text", "url"}`` / ``{"value", "label"}`` at the top level), which is
applied to every track.

Decoding never raises: editing a slider must stay possible whatever the
store holds. Encoding always emits the fully keyed structured form, so a
decode/encode pass converges legacy rows onto the canonical shape.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypedDict, TypeVar

from app.i18n.locale import TrackSet

logger = logging.getLogger(__name__)

MAX_STATISTICS = 4

T = TypeVar("T")


class ButtonValue(TypedDict):
    text: str
    url: str


class StatisticValue(TypedDict):
    value: str
    label: str


LocalizedMap = dict[str, T]


# ── Leaf coercion ─────────────────────────────────────────────────────────────


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _empty_button() -> ButtonValue:
    return {"text": "", "url": ""}


def _empty_statistic() -> StatisticValue:
    return {"value": "", "label": ""}


def _button_leaf(value: Any) -> ButtonValue:
    if isinstance(value, Mapping):
        url = value.get("url")
        if url is None:
            # Older rows stored the link under "href"
            url = value.get("href")
        return {"text": _as_text(value.get("text")), "url": _as_text(url)}
    if isinstance(value, str):
        return {"text": value, "url": ""}
    return _empty_button()


def _statistic_leaf(value: Any) -> StatisticValue:
    if isinstance(value, Mapping):
        return {"value": _as_text(value.get("value")), "label": _as_text(value.get("label"))}
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return {"value": _as_text(value), "label": ""}
    return _empty_statistic()


@dataclass(frozen=True)
class FieldKind:
    """How one localized value type is zeroed, coerced and recognised."""

    name: str
    zero: Callable[[], Any]
    leaf: Callable[[Any], Any]
    flat_keys: frozenset[str] = frozenset()


TEXT = FieldKind("text", zero=str, leaf=_as_text)
BUTTON = FieldKind("button", zero=_empty_button, leaf=_button_leaf, flat_keys=frozenset({"text", "url", "href"}))
STATISTIC = FieldKind("statistic", zero=_empty_statistic, leaf=_statistic_leaf, flat_keys=frozenset({"value", "label"}))


# ── Decoding ──────────────────────────────────────────────────────────────────


def _parse_json(raw: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(raw)
    except (ValueError, RecursionError):
        return False, None


def _zeros(tracks: TrackSet, kind: FieldKind) -> dict[str, Any]:
    return {code: kind.zero() for code in tracks.codes}


def _is_flat_object(raw: Mapping[str, Any], tracks: TrackSet, kind: FieldKind) -> bool:
    if not kind.flat_keys or any(code in raw for code in tracks.codes):
        return False
    return any(key in raw for key in kind.flat_keys)


def decode(raw: Any, tracks: TrackSet, kind: FieldKind = TEXT) -> dict[str, Any]:
    """Normalize ``raw`` into a map with exactly one entry per track."""
    if raw is None:
        return _zeros(tracks, kind)

    if isinstance(raw, str):
        parsed_ok, parsed = _parse_json(raw)
        if not (parsed_ok and isinstance(parsed, Mapping)):
            logger.debug("Decoding %s value as flat legacy content", kind.name)
            return {code: kind.leaf(raw) for code in tracks.codes}
        raw = parsed

    if isinstance(raw, Mapping):
        if _is_flat_object(raw, tracks, kind):
            logger.debug("Decoding pre-localization %s object", kind.name)
            return {code: kind.leaf(raw) for code in tracks.codes}
        unknown = [key for key in raw if key not in tracks]
        if unknown:
            logger.debug("Dropping unknown tracks %s from %s value", unknown, kind.name)
        return {code: kind.leaf(raw.get(code)) for code in tracks.codes}

    logger.debug("Unsupported %s value of type %s, using zero values", kind.name, type(raw).__name__)
    return _zeros(tracks, kind)


def decode_text(raw: Any, tracks: TrackSet) -> LocalizedMap[str]:
    return decode(raw, tracks, TEXT)


def decode_button(raw: Any, tracks: TrackSet) -> LocalizedMap[ButtonValue]:
    return decode(raw, tracks, BUTTON)


def decode_statistic(raw: Any, tracks: TrackSet) -> LocalizedMap[StatisticValue]:
    return decode(raw, tracks, STATISTIC)


def decode_statistics(raw: Any, tracks: TrackSet) -> list[LocalizedMap[StatisticValue]]:
    """Decode a statistics list element by element.

    A source that is not a list (after JSON parsing of strings) becomes a
    single empty statistic; lists are capped at ``MAX_STATISTICS``.
    """
    if isinstance(raw, str):
        parsed_ok, parsed = _parse_json(raw)
        raw = parsed if parsed_ok else None

    if not isinstance(raw, (list, tuple)):
        return [_zeros(tracks, STATISTIC)]

    if len(raw) > MAX_STATISTICS:
        logger.debug("Truncating %d statistics to %d", len(raw), MAX_STATISTICS)
    return [decode_statistic(item, tracks) for item in raw[:MAX_STATISTICS]]


# ── Encoding ──────────────────────────────────────────────────────────────────


def encode(value: Mapping[str, Any] | Sequence[Mapping[str, Any]]) -> dict[str, Any] | list[dict[str, Any]]:
    """Return the structured wire form of a canonical map (or list of maps)."""
    if isinstance(value, Mapping):
        return {code: dict(leaf) if isinstance(leaf, Mapping) else leaf for code, leaf in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    raise TypeError(f"Cannot encode {type(value).__name__} as a localized value")


# ── Display helpers ───────────────────────────────────────────────────────────


def has_content(value: Any) -> bool:
    """True when a leaf (or any part of a structured leaf) is a non-empty string."""
    if isinstance(value, str):
        return bool(value)
    if isinstance(value, Mapping):
        return any(has_content(v) for v in value.values())
    return False


def localize(value: Mapping[str, T], locale: str, tracks: TrackSet) -> T:
    """Pick the best single-language leaf from a decoded map.

    Tries the exact locale, its base language, the default track, then the
    first track with content. When every track is empty the empty leaf is
    returned: ``""`` for text, the zero object for buttons and statistics.
    """
    candidates = [locale, locale.split("-")[0]]
    if tracks.default is not None:
        candidates.append(tracks.default.code)

    for code in candidates:
        if has_content(value.get(code)):
            return value[code]

    for leaf in value.values():
        if has_content(leaf):
            return leaf
    return next(iter(value.values()), "")
