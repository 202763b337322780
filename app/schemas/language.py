from typing import Optional

from pydantic import Field

from app.schemas.hero_slider import CamelModel


class LanguageCreate(CamelModel):
    code: str = Field(..., min_length=2, max_length=10, pattern=r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")
    name: str = Field(..., min_length=1, max_length=100)
    native_name: Optional[str] = Field(None, max_length=100)
    is_active: bool = True
    is_default: bool = False
    direction: Optional[str] = Field(None, pattern="^(ltr|rtl)$")


class LanguageResponse(CamelModel):
    code: str
    name: str
    native_name: Optional[str] = None
    is_active: bool
    is_default: bool
    direction: Optional[str] = None


class LanguageListResponse(CamelModel):
    languages: list[LanguageResponse]


class LanguageCreatedResponse(CamelModel):
    ok: bool = True
    language: LanguageResponse
