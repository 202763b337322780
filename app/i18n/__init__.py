"""
i18n (Internationalization) package

Provides language tracks, locale helpers, and the codec that normalizes
localized slider fields into one canonical per-language structure.
"""

from .codec import (
    MAX_STATISTICS,
    ButtonValue,
    LocalizedMap,
    StatisticValue,
    decode_button,
    decode_statistic,
    decode_statistics,
    decode_text,
    encode,
    localize,
)
from .locale import (
    LANGUAGE_NAMES,
    RTL_LOCALES,
    LanguageTrack,
    TrackSet,
    get_language_info,
    is_rtl_locale,
    parse_accept_language,
)

__all__ = [
    "LANGUAGE_NAMES",
    "MAX_STATISTICS",
    "RTL_LOCALES",
    "ButtonValue",
    "LanguageTrack",
    "LocalizedMap",
    "StatisticValue",
    "TrackSet",
    "decode_button",
    "decode_statistic",
    "decode_statistics",
    "decode_text",
    "encode",
    "get_language_info",
    "is_rtl_locale",
    "localize",
    "parse_accept_language",
]
