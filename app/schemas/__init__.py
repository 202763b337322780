from .hero_slider import (
    HeroSliderCreate,
    HeroSliderEnvelope,
    HeroSliderListResponse,
    HeroSliderResponse,
    HeroSliderUpdate,
    PublicSliderListResponse,
    PublicSliderResponse,
)
from .language import LanguageCreate, LanguageListResponse, LanguageResponse

# Define the public API of this module
__all__ = [
    "HeroSliderCreate",
    "HeroSliderEnvelope",
    "HeroSliderListResponse",
    "HeroSliderResponse",
    "HeroSliderUpdate",
    "PublicSliderListResponse",
    "PublicSliderResponse",
    "LanguageCreate",
    "LanguageListResponse",
    "LanguageResponse",
]
