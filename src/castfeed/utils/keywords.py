"""Keyword list advisories shared by channels and episodes."""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

# iTunes recommends no more than 12 keywords per channel or episode
MAX_KEYWORD_COUNT = 12


def check_keyword_count(
    keywords: Sequence[str] | None, log: logging.Logger | None = None
) -> bool:
    """Log an advisory when a keyword list exceeds the recommended size.

    The list is never modified and an oversized list is not an error.

    Args:
        keywords: Keywords to check (None is treated as empty)
        log: Logger receiving the advisory (module logger if None)

    Returns:
        True if the list is within the recommended maximum
    """
    if not keywords or len(keywords) <= MAX_KEYWORD_COUNT:
        return True

    (log or logger).info(
        "The list of keywords has %d entries, which exceeds the recommended maximum of %d.",
        len(keywords),
        MAX_KEYWORD_COUNT,
    )
    return False
