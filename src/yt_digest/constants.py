"""
Single place for constants that are used across the package.
"""

from typing import Final, Tuple

SERVER_NAME: Final[str] = "youtube-summarizer-server"
SERVER_VERSION: Final[str] = "0.1.1"

FORMATS: Final[Tuple[str, ...]] = ("plain", "structured")
DEFAULT_FORMAT: Final[str] = "structured"
DEFAULT_LANGUAGE: Final[str] = "en"

# --------------------------- document layout ---------------------------- #
SECTION_WINDOW_SECONDS: Final[int] = 120
SENTENCES_PER_PARAGRAPH: Final[int] = 4

# env var that overrides the console log level chosen by -v
LOGLEVEL_ENV: Final[str] = "YT_DIGEST_LOGLEVEL"

# NOTE: static pool kept only as *fallback* when fake-useragent cannot load
# its bundled data.
USER_AGENTS_POOL: Final[list[str]] = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
]
