"""
Hero Slider Service

CRUD operations for hero slider rows. This is the authoritative store the
admin client reconciles against: it keeps rows in their raw wire shape,
applies its own (looser) required-field checks, and rejects updates that
carry a stale version.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.exceptions import MissingFieldsError, SliderNotFoundError, VersionConflictError
from app.i18n.codec import (
    decode_button,
    decode_statistics,
    decode_text,
    has_content,
    localize,
)
from app.i18n.locale import TrackSet
from app.models.hero_slider import HeroSlider
from app.schemas.hero_slider import HeroSliderCreate

logger = logging.getLogger(__name__)

# Attribute name -> wire name, checked on create
REQUIRED_FIELDS = {
    "title": "title",
    "description": "description",
    "background_image": "backgroundImage",
    "primary_button": "primaryButton",
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, dict, list)):
        return not value
    return False


class HeroSliderService:
    """Service for managing hero slider rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_sliders(
        self,
        page: int = 1,
        limit: int = 10,
        is_active: bool | None = None,
    ) -> tuple[list[HeroSlider], int]:
        """Return one page of sliders sorted by order, plus the total count."""
        query = select(HeroSlider)
        count_query = select(func.count(HeroSlider.id))
        if is_active is not None:
            query = query.where(HeroSlider.is_active.is_(is_active))
            count_query = count_query.where(HeroSlider.is_active.is_(is_active))

        query = (
            query.order_by(HeroSlider.order.asc(), HeroSlider.created_at.desc(), HeroSlider.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.db.execute(query)
        total = (await self.db.execute(count_query)).scalar_one()
        return list(result.scalars().all()), total

    async def list_public(self, limit: int) -> list[HeroSlider]:
        """Active sliders in display order."""
        result = await self.db.execute(
            select(HeroSlider)
            .where(HeroSlider.is_active.is_(True))
            .order_by(HeroSlider.order.asc(), HeroSlider.created_at.desc(), HeroSlider.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_slider(self, slider_id: int) -> HeroSlider:
        slider = await self.db.get(HeroSlider, slider_id)
        if slider is None:
            raise SliderNotFoundError(slider_id)
        return slider

    async def next_order(self) -> int:
        """First position after the current highest order (1 for an empty table)."""
        highest = (await self.db.execute(select(func.max(HeroSlider.order)))).scalar_one_or_none()
        return (highest or 0) + 1

    async def create_slider(self, data: HeroSliderCreate, user_id: int | None = None) -> HeroSlider:
        """Insert a slider.

        Raises:
            MissingFieldsError: if title, description, backgroundImage or
                primaryButton is absent or empty.
        """
        missing = [wire for attr, wire in REQUIRED_FIELDS.items() if _is_blank(getattr(data, attr))]
        if missing:
            raise MissingFieldsError(missing)

        order = data.order if data.order is not None else await self.next_order()
        slider = HeroSlider(
            title=data.title,
            subtitle=data.subtitle,
            description=data.description,
            badge=data.badge,
            background_image=data.background_image,
            primary_button=data.primary_button,
            secondary_button=data.secondary_button,
            statistics=data.statistics,
            is_active=data.is_active,
            order=order,
            created_by_id=user_id,
        )
        self.db.add(slider)
        await self.db.commit()
        await self.db.refresh(slider)
        logger.info("Hero slider created: id=%d order=%d", slider.id, slider.order)
        return slider

    async def update_slider(
        self,
        slider_id: int,
        updates: dict[str, Any],
        user_id: int | None = None,
        expected_version: int | None = None,
    ) -> HeroSlider:
        """Apply a partial update.

        ``updates`` is keyed by attribute name; only the keys present are
        written, so ``{"order": 3}`` alone is a valid update.

        Raises:
            SliderNotFoundError: if the slider does not exist.
            VersionConflictError: if ``expected_version`` is stale.
            MissingFieldsError: if a required field is being cleared.
        """
        slider = await self.get_slider(slider_id)

        if expected_version is not None and expected_version != slider.version:
            logger.warning(
                "Hero slider version conflict: id=%d expected=%d current=%d",
                slider_id,
                expected_version,
                slider.version,
            )
            raise VersionConflictError(slider_id, expected_version, slider.version)

        cleared = [wire for attr, wire in REQUIRED_FIELDS.items() if attr in updates and _is_blank(updates[attr])]
        if cleared:
            raise MissingFieldsError(cleared)

        for key, value in updates.items():
            if hasattr(HeroSlider, key) and key not in {"id", "version", "created_at", "created_by_id"}:
                setattr(slider, key, value)

        loaded_version = slider.version
        slider.updated_by_id = user_id
        # Always emit the UPDATE so every accepted write bumps the version
        slider.updated_at = datetime.now(timezone.utc)
        try:
            await self.db.commit()
        except StaleDataError:
            # Another request committed between our read and this write
            await self.db.rollback()
            current = (
                await self.db.execute(select(HeroSlider.version).where(HeroSlider.id == slider_id))
            ).scalar_one_or_none()
            if current is None:
                raise SliderNotFoundError(slider_id) from None
            logger.warning(
                "Hero slider concurrent write lost: id=%d loaded=%d current=%d", slider_id, loaded_version, current
            )
            raise VersionConflictError(slider_id, expected_version or loaded_version, current) from None
        await self.db.refresh(slider)
        logger.info("Hero slider updated: id=%d fields=%s version=%d", slider_id, sorted(updates), slider.version)
        return slider

    async def delete_slider(self, slider_id: int) -> None:
        """Delete a slider. Remaining orders are left as they are."""
        slider = await self.get_slider(slider_id)
        await self.db.delete(slider)
        await self.db.commit()
        logger.info("Hero slider deleted: id=%d", slider_id)


def _optional(leaf: Any) -> Any:
    return leaf if has_content(leaf) else None


def present_localized(slider: HeroSlider, locale: str, tracks: TrackSet) -> dict[str, Any]:
    """Render one slider for a single language, with default-language fallback.

    Optional fields with no content in any language come out as None.
    """
    statistics = [
        localize(stat, locale, tracks) for stat in decode_statistics(slider.statistics, tracks)
    ]
    return {
        "id": slider.id,
        "title": localize(decode_text(slider.title, tracks), locale, tracks),
        "subtitle": _optional(localize(decode_text(slider.subtitle, tracks), locale, tracks)),
        "description": localize(decode_text(slider.description, tracks), locale, tracks),
        "badge": _optional(localize(decode_text(slider.badge, tracks), locale, tracks)),
        "background_image": slider.background_image,
        "primary_button": _optional(localize(decode_button(slider.primary_button, tracks), locale, tracks)),
        "secondary_button": _optional(localize(decode_button(slider.secondary_button, tracks), locale, tracks)),
        "statistics": [stat for stat in statistics if has_content(stat)],
        "order": slider.order,
        "created_at": slider.created_at,
    }


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
