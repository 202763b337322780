"""
HeroSlider model

One orderable promotional slide. Localized fields are stored as JSON so
that rows written before localization (plain strings) and rows written by
the current admin (per-language objects) live side by side; readers
normalize them through ``app.i18n.codec``.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Index, Integer, String

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HeroSlider(Base):
    __tablename__ = "hero_sliders"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # ── Localized fields (raw wire shape) ─────────────────────────────────────
    title = Column(JSON, nullable=False)
    subtitle = Column(JSON, nullable=True)
    description = Column(JSON, nullable=False)
    badge = Column(JSON, nullable=True)
    primary_button = Column(JSON, nullable=False)
    secondary_button = Column(JSON, nullable=True)
    statistics = Column(JSON, nullable=True)

    # ── Track-independent fields ──────────────────────────────────────────────
    background_image = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    order = Column(Integer, nullable=False, default=0)

    # Maintained by the mapper: every UPDATE matches on the loaded version and
    # bumps it, so a concurrent write loses with StaleDataError
    version = Column(Integer, nullable=False, default=1)

    # ── Audit ─────────────────────────────────────────────────────────────────
    created_by_id = Column(Integer, nullable=True)
    updated_by_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("idx_hero_slider_order", "order"),
        Index("idx_hero_slider_active_order", "is_active", "order"),
    )
    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<HeroSlider(id={self.id}, order={self.order}, active={self.is_active})>"
