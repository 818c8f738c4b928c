from __future__ import annotations

import logging
import random

from fake_useragent import UserAgent

from .constants import USER_AGENTS_POOL

log = logging.getLogger(__name__)


def _pick_ua(browser: str | None = None, os: str | None = None) -> str:
    """Return a plausible User-Agent string for the caption session."""
    filters: dict[str, list[str]] = {}
    if browser:
        filters["browsers"] = [browser]
    if os:
        filters["os"] = [os]

    try:
        return UserAgent(**filters).random
    except Exception as exc:  # noqa: BLE001
        log.warning("fake-useragent failed (%s) - using fallback UA", exc)
        return random.choice(USER_AGENTS_POOL)
