from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Localized fields arrive as per-language objects, or as legacy strings
LocalizedValue = Union[dict[str, Any], str]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class HeroSliderCreate(CamelModel):
    title: Optional[LocalizedValue] = Field(None, description="Per-language slide title.")
    subtitle: Optional[LocalizedValue] = Field(None, description="Per-language subtitle.")
    description: Optional[LocalizedValue] = Field(None, description="Per-language body text.")
    badge: Optional[LocalizedValue] = Field(None, description="Per-language badge text.")
    background_image: Optional[str] = Field(None, description="Background image reference.")
    primary_button: Optional[LocalizedValue] = Field(None, description="Per-language {text, url} button.")
    secondary_button: Optional[LocalizedValue] = Field(None, description="Optional per-language button.")
    statistics: Optional[Union[list[Any], str]] = Field(None, description="Up to four per-language statistics.")
    is_active: bool = Field(True, description="Whether the slide is shown publicly.")
    order: Optional[int] = Field(None, ge=0, description="Display position; defaults to the next free position.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": {"tr": "Performansın Zirvesi", "en": "Peak Performance"},
                "description": {"tr": "Profesyonel hizmet.", "en": "Professional service."},
                "backgroundImage": "/uploads/hero-slider/slide-1.jpg",
                "primaryButton": {
                    "tr": {"text": "Keşfet", "url": "/tr/services"},
                    "en": {"text": "Explore", "url": "/en/services"},
                },
                "statistics": [{"tr": {"value": "500+", "label": "Müşteri"}, "en": {"value": "500+", "label": "Clients"}}],
                "isActive": True,
            }
        }
    )


class HeroSliderUpdate(CamelModel):
    """Partial update; only fields present in the request body are applied."""

    title: Optional[LocalizedValue] = None
    subtitle: Optional[LocalizedValue] = None
    description: Optional[LocalizedValue] = None
    badge: Optional[LocalizedValue] = None
    background_image: Optional[str] = None
    primary_button: Optional[LocalizedValue] = None
    secondary_button: Optional[LocalizedValue] = None
    statistics: Optional[Union[list[Any], str]] = None
    is_active: Optional[bool] = None
    order: Optional[int] = Field(None, ge=0)
    version: Optional[int] = Field(None, ge=1, description="Version the client last read; mismatches are rejected.")

    @field_validator("is_active", "order")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """These columns cannot be cleared; omit the key to leave them unchanged."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class HeroSliderResponse(CamelModel):
    id: int
    title: Any
    subtitle: Any = None
    description: Any
    badge: Any = None
    background_image: str
    primary_button: Any
    secondary_button: Any = None
    statistics: Any = None
    is_active: bool
    order: int
    version: int
    created_by_id: Optional[int] = None
    updated_by_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    page: int
    limit: int
    total_count: int
    total_pages: int


class HeroSliderListResponse(CamelModel):
    sliders: list[HeroSliderResponse]
    pagination: Pagination


class HeroSliderEnvelope(CamelModel):
    message: Optional[str] = None
    slider: HeroSliderResponse


class MessageResponse(CamelModel):
    message: str


class PublicSliderResponse(CamelModel):
    id: int
    title: Any
    subtitle: Any = None
    description: Any
    badge: Any = None
    background_image: str
    primary_button: Any
    secondary_button: Any = None
    statistics: Any = None
    order: int
    created_at: datetime


class PublicSliderListResponse(CamelModel):
    sliders: list[PublicSliderResponse]
    count: int
    locale: Optional[str] = None
