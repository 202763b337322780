"""
Language Routes

i18n_router  (prefix: /api/v1/i18n)
    GET    /languages   → active languages, default first (public)

admin_languages_router  (prefix: /api/v1/admin/i18n)
    POST   /languages   → create a language (bearer token required)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from app.auth import CurrentUser, get_current_user
from app.database import get_db
from app.schemas.language import LanguageCreate, LanguageCreatedResponse, LanguageListResponse, LanguageResponse
from app.services.language_service import create_language, list_active_languages

i18n_router = APIRouter(tags=["Internationalization"])
admin_languages_router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


@i18n_router.get("/languages", response_model=LanguageListResponse)
async def list_languages_route(db: AsyncSession = Depends(get_db)) -> LanguageListResponse:
    """List active languages; the editor builds its language tracks from this."""
    languages = await list_active_languages(db)
    return LanguageListResponse(languages=[LanguageResponse.model_validate(lang) for lang in languages])


@admin_languages_router.post(
    "/languages",
    response_model=LanguageCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_language_route(
    payload: LanguageCreate,
    db: AsyncSession = Depends(get_db),
    _current_user: CurrentUser = Depends(get_current_user),
) -> LanguageCreatedResponse:
    language = await create_language(payload, db)
    return LanguageCreatedResponse(language=LanguageResponse.model_validate(language))
