"""
Language Service

Async functions for the content-language table, which supplies the set of
active language tracks to the slider editor.

Functions:
    list_active_languages: active rows, default first then by code
    get_track_set        : active languages as a TrackSet (config fallback)
    create_language      : insert a language, moving the default flag if asked
"""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from app.config import settings
from app.exceptions import DuplicateResourceError
from app.i18n.locale import LanguageTrack, TrackSet, get_language_info, is_rtl_locale
from app.models.language import Language
from app.schemas.language import LanguageCreate  # noqa: TC001

logger = logging.getLogger(__name__)


def configured_languages() -> list[Language]:
    """Unsaved Language objects built from settings, used before any row exists."""
    languages = []
    for code in settings.supported_languages:
        info = get_language_info(code)
        languages.append(
            Language(
                code=code,
                name=info["name"],
                is_active=True,
                is_default=code == settings.default_language,
                direction="rtl" if info["is_rtl"] else "ltr",
            )
        )
    return languages


async def list_active_languages(db: AsyncSession) -> list[Language]:
    """Return active languages, falling back to configured ones when the table is empty."""
    result = await db.execute(
        select(Language).where(Language.is_active.is_(True)).order_by(Language.is_default.desc(), Language.code)
    )
    languages = list(result.scalars().all())
    if languages:
        return languages

    logger.debug("No active language rows, using configured languages %s", settings.supported_languages)
    return configured_languages()


async def get_track_set(db: AsyncSession) -> TrackSet:
    languages = await list_active_languages(db)
    return TrackSet(LanguageTrack(code=lang.code, is_default=bool(lang.is_default), name=lang.name) for lang in languages)


async def create_language(payload: LanguageCreate, db: AsyncSession) -> Language:
    """Insert a language.

    When ``is_default`` is set, every other row loses its default flag in the
    same transaction.

    Raises:
        DuplicateResourceError: if a language with the same code exists.
    """
    existing = await db.execute(select(Language.id).where(Language.code == payload.code))
    if existing.scalar_one_or_none() is not None:
        raise DuplicateResourceError("Language", "code", payload.code)

    if payload.is_default:
        await db.execute(update(Language).values(is_default=False))

    language = Language(
        code=payload.code,
        name=payload.name,
        native_name=payload.native_name,
        is_active=payload.is_active,
        is_default=payload.is_default,
        direction=payload.direction or ("rtl" if is_rtl_locale(payload.code) else "ltr"),
    )
    db.add(language)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateResourceError("Language", "code", payload.code)
    await db.refresh(language)
    logger.info("Language created: code=%s default=%s", language.code, language.is_default)
    return language
