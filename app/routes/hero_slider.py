"""
Hero Slider Routes

Two APIRouter objects exported from this module:

admin_router  (prefix: /api/v1/admin/hero-slider, bearer token required)
    GET    /          → paginated list sorted by order
    POST   /          → create slider
    GET    /{id}      → get slider
    PUT    /{id}      → partial update (order alone, isActive alone, or full edit)
    DELETE /{id}      → delete slider

public_router  (prefix: /api/v1/hero-slider)
    GET    /          → active sliders; ?locale= renders one language
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from app.auth import CurrentUser, get_current_user
from app.config import settings
from app.database import get_db
from app.i18n.locale import parse_accept_language
from app.schemas.hero_slider import (
    HeroSliderCreate,
    HeroSliderEnvelope,
    HeroSliderListResponse,
    HeroSliderResponse,
    HeroSliderUpdate,
    MessageResponse,
    Pagination,
    PublicSliderListResponse,
    PublicSliderResponse,
)
from app.services.hero_slider_service import HeroSliderService, present_localized, total_pages
from app.services.language_service import get_track_set

admin_router = APIRouter(tags=["Hero Slider"])
public_router = APIRouter(tags=["Hero Slider (public)"])
logger = logging.getLogger(__name__)


def _active_filter(value: Optional[str]) -> Optional[bool]:
    if value is None or value == "all":
        return None
    return value == "true"


# ── Admin routes ───────────────────────────────────────────────────────────────


@admin_router.get("", response_model=HeroSliderListResponse)
async def list_sliders_route(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=settings.admin_page_limit_max),
    is_active: Optional[str] = Query(None, alias="isActive", pattern="^(true|false|all)$"),
    db: AsyncSession = Depends(get_db),
    _current_user: CurrentUser = Depends(get_current_user),
) -> HeroSliderListResponse:
    """List sliders sorted by order, then newest first."""
    sliders, total = await HeroSliderService(db).list_sliders(page=page, limit=limit, is_active=_active_filter(is_active))
    return HeroSliderListResponse(
        sliders=[HeroSliderResponse.model_validate(s) for s in sliders],
        pagination=Pagination(page=page, limit=limit, total_count=total, total_pages=total_pages(total, limit)),
    )


@admin_router.post("", response_model=HeroSliderEnvelope, status_code=status.HTTP_201_CREATED)
async def create_slider_route(
    payload: HeroSliderCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> HeroSliderEnvelope:
    slider = await HeroSliderService(db).create_slider(payload, user_id=current_user.id)
    return HeroSliderEnvelope(message="Hero slider created", slider=HeroSliderResponse.model_validate(slider))


@admin_router.get("/{slider_id}", response_model=HeroSliderEnvelope)
async def get_slider_route(
    slider_id: int,
    db: AsyncSession = Depends(get_db),
    _current_user: CurrentUser = Depends(get_current_user),
) -> HeroSliderEnvelope:
    slider = await HeroSliderService(db).get_slider(slider_id)
    return HeroSliderEnvelope(slider=HeroSliderResponse.model_validate(slider))


@admin_router.put("/{slider_id}", response_model=HeroSliderEnvelope)
async def update_slider_route(
    slider_id: int,
    payload: HeroSliderUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> HeroSliderEnvelope:
    """Apply only the fields present in the body. ``version`` guards against concurrent edits."""
    updates = payload.model_dump(exclude_unset=True)
    expected_version = updates.pop("version", None)
    slider = await HeroSliderService(db).update_slider(
        slider_id, updates, user_id=current_user.id, expected_version=expected_version
    )
    return HeroSliderEnvelope(message="Hero slider updated", slider=HeroSliderResponse.model_validate(slider))


@admin_router.delete("/{slider_id}", response_model=MessageResponse)
async def delete_slider_route(
    slider_id: int,
    db: AsyncSession = Depends(get_db),
    _current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    await HeroSliderService(db).delete_slider(slider_id)
    return MessageResponse(message="Hero slider deleted")


# ── Public routes ──────────────────────────────────────────────────────────────


@public_router.get("", response_model=PublicSliderListResponse)
async def list_public_sliders_route(
    limit: int = Query(settings.public_slider_limit, ge=1, le=settings.admin_page_limit_max),
    locale: Optional[str] = Query(None, max_length=35),
    db: AsyncSession = Depends(get_db),
) -> PublicSliderListResponse:
    """Active sliders in display order (no auth).

    Without ``locale`` the stored per-language objects are returned as is.
    With it, each field is reduced to one language, falling back to the
    default language when the requested one is empty.
    """
    sliders = await HeroSliderService(db).list_public(limit)
    if locale is None:
        return PublicSliderListResponse(
            sliders=[PublicSliderResponse.model_validate(s) for s in sliders],
            count=len(sliders),
        )

    tracks = await get_track_set(db)
    resolved = parse_accept_language(locale, list(tracks.codes)) or (tracks.default.code if tracks.default else locale)
    return PublicSliderListResponse(
        sliders=[PublicSliderResponse.model_validate(present_localized(s, resolved, tracks)) for s in sliders],
        count=len(sliders),
        locale=resolved,
    )
