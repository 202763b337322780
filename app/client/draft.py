"""
Editable slider draft

A client-local copy of one slider in canonical form. Built from a stored
record through the codec, mutated field by field while editing, and
re-encoded to the wire payload on submit. Discarding the object discards
the edit.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.i18n.codec import (
    MAX_STATISTICS,
    ButtonValue,
    StatisticValue,
    decode_button,
    decode_statistic,
    decode_statistics,
    decode_text,
    encode,
    has_content,
)
from app.i18n.locale import TrackSet


@dataclass
class SliderDraft:
    title: dict[str, str] = field(default_factory=dict)
    description: dict[str, str] = field(default_factory=dict)
    subtitle: dict[str, str] = field(default_factory=dict)
    badge: dict[str, str] = field(default_factory=dict)
    primary_button: dict[str, ButtonValue] = field(default_factory=dict)
    secondary_button: dict[str, ButtonValue] = field(default_factory=dict)
    statistics: list[dict[str, StatisticValue]] = field(default_factory=list)
    background_image: str = ""
    is_active: bool = True
    order: int | None = None

    @classmethod
    def blank(cls, tracks: TrackSet) -> SliderDraft:
        return cls.from_record({}, tracks)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], tracks: TrackSet) -> SliderDraft:
        """Decode a stored slider record (camelCase keys) for editing."""
        order = record.get("order")
        return cls(
            title=decode_text(record.get("title"), tracks),
            description=decode_text(record.get("description"), tracks),
            subtitle=decode_text(record.get("subtitle"), tracks),
            badge=decode_text(record.get("badge"), tracks),
            primary_button=decode_button(record.get("primaryButton"), tracks),
            secondary_button=decode_button(record.get("secondaryButton"), tracks),
            statistics=decode_statistics(record.get("statistics"), tracks),
            background_image=record.get("backgroundImage") or "",
            is_active=bool(record.get("isActive", True)),
            order=order if isinstance(order, int) and not isinstance(order, bool) else None,
        )

    def add_statistic(self, tracks: TrackSet) -> bool:
        if len(self.statistics) >= MAX_STATISTICS:
            return False
        self.statistics.append(decode_statistic(None, tracks))
        return True

    def remove_statistic(self, index: int) -> bool:
        # The form always keeps one statistic row to type into
        if len(self.statistics) <= 1 or not 0 <= index < len(self.statistics):
            return False
        del self.statistics[index]
        return True

    def to_payload(self) -> dict[str, Any]:
        """Encode the draft into the create/update request body."""
        payload: dict[str, Any] = {
            "title": encode(self.title),
            "subtitle": encode(self.subtitle) if has_content(self.subtitle) else None,
            "description": encode(self.description),
            "badge": encode(self.badge) if has_content(self.badge) else None,
            "backgroundImage": self.background_image,
            "primaryButton": encode(self.primary_button),
            "secondaryButton": (
                encode(self.secondary_button)
                if any(has_content(button["text"]) for button in self.secondary_button.values())
                else None
            ),
            "statistics": encode(
                [stat for stat in self.statistics if any(has_content(v["value"]) for v in stat.values())]
            ),
            "isActive": self.is_active,
        }
        if self.order is not None:
            payload["order"] = self.order
        return payload
