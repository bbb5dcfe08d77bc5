"""
Redis constants.
Centralizes cache keys for visibility. The dish listing TTL lives in
settings (DISH_CACHE_TTL_SECONDS).
"""

# =============================================================================
# Cache Keys
# =============================================================================

# One key per cached listing; the whole listing is replaced or dropped at once
CACHE_KEY_DISH_LIST = "dishes_list"
