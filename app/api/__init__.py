"""
API Versioning Module

URL prefixes shared by the routers and the admin client gateway.
"""

API_V1_PREFIX = "/api/v1"
ADMIN_PREFIX = f"{API_V1_PREFIX}/admin"

HERO_SLIDER_ADMIN_PREFIX = f"{ADMIN_PREFIX}/hero-slider"
HERO_SLIDER_PUBLIC_PREFIX = f"{API_V1_PREFIX}/hero-slider"
I18N_PREFIX = f"{API_V1_PREFIX}/i18n"
I18N_ADMIN_PREFIX = f"{ADMIN_PREFIX}/i18n"
