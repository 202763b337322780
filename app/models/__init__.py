from .hero_slider import HeroSlider
from .language import Language

__all__ = [
    "HeroSlider",
    "Language",
]
