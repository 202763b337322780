"""
Locale helpers and language tracks

Pure functions and value types for BCP 47 locale handling:
- Language tracks (one per active language, one marked default)
- RTL (right-to-left) language detection
- Accept-Language header parsing with quality-value (q=) support
- Language metadata lookup
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

# ── Constants ─────────────────────────────────────────────────────────────────

# BCP 47 base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})

# Human-readable names for common locales (subset of BCP 47 code space)
LANGUAGE_NAMES: dict[str, str] = {
    "tr": "Türkçe",
    "en": "English",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "ar": "العربية",
    "ru": "Русский",
    "zh": "中文",
    "ja": "日本語",
    "it": "Italiano",
}


# ── Language tracks ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class LanguageTrack:
    """One language variant of every localized field."""

    code: str
    is_default: bool = False
    name: str = ""


class TrackSet:
    """Ordered, duplicate-free set of active language tracks.

    The default track always comes first, the rest follow by code. At most
    one track is the default; when tracks exist and none is flagged, the
    first one is promoted.
    """

    def __init__(self, tracks: Iterable[LanguageTrack] = ()):
        unique: dict[str, LanguageTrack] = {}
        for track in tracks:
            if track.code and track.code not in unique:
                unique[track.code] = track

        default_code = next((t.code for t in unique.values() if t.is_default), None)
        if default_code is None and unique:
            default_code = next(iter(unique))

        ordered = sorted(unique.values(), key=lambda t: (t.code != default_code, t.code))
        self._tracks: tuple[LanguageTrack, ...] = tuple(
            LanguageTrack(code=t.code, is_default=t.code == default_code, name=t.name or language_name(t.code))
            for t in ordered
        )

    @classmethod
    def from_codes(cls, codes: Iterable[str], default: str | None = None) -> TrackSet:
        return cls(LanguageTrack(code=code, is_default=code == default) for code in codes)

    @classmethod
    def from_languages(cls, languages: Iterable[Mapping[str, Any]]) -> TrackSet:
        """Build a track set from ``{code, isActive, isDefault}`` records.

        Inactive rows are dropped. snake_case keys are accepted as well.
        """
        tracks = []
        for row in languages:
            is_active = row.get("isActive", row.get("is_active", True))
            if not is_active or not row.get("code"):
                continue
            tracks.append(
                LanguageTrack(
                    code=str(row["code"]),
                    is_default=bool(row.get("isDefault", row.get("is_default", False))),
                    name=str(row.get("name") or ""),
                )
            )
        return cls(tracks)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(t.code for t in self._tracks)

    @property
    def default(self) -> LanguageTrack | None:
        return self._tracks[0] if self._tracks else None

    def __iter__(self) -> Iterator[LanguageTrack]:
        return iter(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrackSet):
            return NotImplemented
        return self._tracks == other._tracks

    def __repr__(self) -> str:
        return f"<TrackSet {list(self.codes)} default={self.default.code if self.default else None}>"


# ── Public helpers ────────────────────────────────────────────────────────────


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given BCP 47 locale is right-to-left.

    Compares only the base language tag (before the first hyphen), so
    both "ar" and "ar-SA" are correctly identified as RTL.
    """
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def language_name(locale: str) -> str:
    return LANGUAGE_NAMES.get(locale, LANGUAGE_NAMES.get(locale.split("-")[0].lower(), locale))


def parse_accept_language(header: str, supported: list[str]) -> str | None:
    """Parse an Accept-Language header and return the best matching locale.

    Algorithm:
    1. Split header into tags with optional q-values (default q=1.0).
    2. Sort by q-value descending.
    3. For each tag, try exact match in `supported`, then base-language match.
    4. Return the first match or None if nothing matches.

    Args:
        header:    Value of the Accept-Language HTTP header, e.g.
                   "tr-TR,tr;q=0.9,en;q=0.7".
        supported: Ordered list of BCP 47 locale codes the server supports.

    Returns:
        The best matching locale from `supported`, or None.
    """
    if not header:
        return None

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        if ";q=" in part:
            tag, q_str = part.split(";q=", 1)
            try:
                q = float(q_str.strip())
            except ValueError:
                q = 1.0
        else:
            tag = part
            q = 1.0
        weighted.append((q, tag.strip()))

    # Stable sort keeps header order for equal q-values
    weighted.sort(key=lambda x: x[0], reverse=True)

    supported_lower = [s.lower() for s in supported]

    for _, tag in weighted:
        tag_lower = tag.lower()
        if tag_lower in supported_lower:
            return supported[supported_lower.index(tag_lower)]
        base = tag_lower.split("-")[0]
        if base in supported_lower:
            return supported[supported_lower.index(base)]

    return None


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Returns:
        Dict with keys: ``code`` (str), ``name`` (str), ``is_rtl`` (bool).
    """
    return {
        "code": locale,
        "name": language_name(locale),
        "is_rtl": is_rtl_locale(locale),
    }
