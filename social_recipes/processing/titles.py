"""Recipe title detection for social media posts.

Finds dish names such as "Shrimp Scampi" in captions, page titles and overlay
text while skipping lines like "Follow me for more recipes".
"""

import re
from collections.abc import Callable

from ..logging import get_logger
from ..models import TitleSources
from .lexicon import (
    FOOD_EMOJI,
    INSTRUCTION_VERBS,
    MEASUREMENT_UNITS,
    PLATFORM_NAMES,
    TITLE_PROMO_WORDS,
    TITLE_RECIPE_WORDS,
)
from .text_utils import char_class, split_lines, word_pattern

logger = get_logger(__name__)

TitleExtractor = Callable[[TitleSources], str | None]

REJECTED = -100
MIN_TITLE_SCORE = 20
CAPTION_BONUS = 20

FOOD_EMOJI_PATTERN = char_class(FOOD_EMOJI)
RECIPE_WORD_PATTERN = word_pattern(TITLE_RECIPE_WORDS)
MEASUREMENT_PATTERN = word_pattern(MEASUREMENT_UNITS)
PROMO_PATTERN = word_pattern(TITLE_PROMO_WORDS)
PLATFORM_PATTERN = word_pattern(PLATFORM_NAMES)
INSTRUCTION_PATTERN = word_pattern(INSTRUCTION_VERBS)
HANDLE_PATTERN = re.compile(r'@\w+')
HASHTAG_PATTERN = re.compile(r'#\w+')
TITLE_CASE_PATTERN = re.compile(r'[A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3}')
QUOTES = '"\'“”‘’'
QUOTED_PATTERN = re.compile(f'[{QUOTES}](.{{3,100}})[{QUOTES}]', re.DOTALL)
PAGE_TITLE_SUFFIX_PATTERN = re.compile(r'\s*[|:]\s*(?:TikTok|Instagram).*$')
PAGE_TITLE_PREFIX_PATTERN = re.compile(r'^.*:\s*')


def score_title_candidate(text: str | None) -> int:
    """Score how much a short line looks like a recipe title."""
    if not text:
        return REJECTED

    s = text.strip()
    lowered = s.lower()

    # Quick rejections
    if len(s) < 3 or len(s) > 100:
        return REJECTED
    if INSTRUCTION_PATTERN.match(lowered):
        return -50
    if 'http' in s:
        return REJECTED
    if HANDLE_PATTERN.search(s) or HASHTAG_PATTERN.search(s):
        return -50

    score = 0

    if FOOD_EMOJI_PATTERN.search(s):
        score += 20
    if RECIPE_WORD_PATTERN.search(lowered):
        score += 30

    # Title casing, "Shrimp Scampi"
    if s[0].isupper() and s[0].isascii():
        score += 10
    if TITLE_CASE_PATTERN.fullmatch(s):
        score += 50

    words = len(s.split())
    if 2 <= words <= 6:
        score += 20
    if words == 1:
        score -= 20
    if words > 8:
        score -= 20

    if PROMO_PATTERN.search(lowered):
        score -= 40
    if PLATFORM_PATTERN.search(lowered):
        score -= 30
    if MEASUREMENT_PATTERN.search(lowered):
        score -= 20

    return score


def _quoted_title(text: str) -> str | None:
    match = QUOTED_PATTERN.search(text)
    if not match:
        return None

    candidate = match.group(1).strip()
    if INSTRUCTION_PATTERN.match(candidate.lower()):
        return None
    return candidate


def find_title_in_text(text: str | None) -> str | None:
    """Pick the best title-like phrase or line from a block of text."""
    if not text:
        return None

    quoted = _quoted_title(text)
    if quoted and score_title_candidate(quoted) > 0:
        return quoted

    lines = [line for line in split_lines(text) if 3 <= len(line) <= 100]
    candidates = [(line, score_title_candidate(line)) for line in lines]
    candidates = [c for c in candidates if c[1] > 0]
    candidates.sort(key=lambda c: c[1], reverse=True)

    if candidates and candidates[0][1] >= MIN_TITLE_SCORE:
        return candidates[0][0]
    return None


def clean_page_title(page_title: str) -> str:
    """Strip platform suffixes and ``Author:`` prefixes from a page title."""
    cleaned = PAGE_TITLE_SUFFIX_PATTERN.sub('', page_title)
    cleaned = PAGE_TITLE_PREFIX_PATTERN.sub('', cleaned)
    return cleaned.strip()


def extract_recipe_title(sources: TitleSources) -> str | None:
    """Find a good recipe title across the text sources of a post.

    The caption is the most reliable source and gets a bonus; page title,
    description and overlay text follow. The best candidate must reach
    ``MIN_TITLE_SCORE``.

    Args:
        sources: Caption, text, page title and description of the post

    Returns:
        The title, or None when nothing looks like one
    """
    candidates: list[tuple[str, int, str]] = []

    if sources.caption:
        found = find_title_in_text(sources.caption)
        if found:
            candidates.append((found, score_title_candidate(found) + CAPTION_BONUS, "caption"))

    if sources.page_title:
        cleaned = clean_page_title(sources.page_title)
        if cleaned:
            candidates.append((cleaned, score_title_candidate(cleaned), "page_title"))

    for source, value in (("description", sources.description), ("text", sources.text)):
        if value:
            found = find_title_in_text(value)
            if found:
                candidates.append((found, score_title_candidate(found), source))

    candidates.sort(key=lambda c: c[1], reverse=True)

    if candidates and candidates[0][1] >= MIN_TITLE_SCORE:
        title, score, source = candidates[0]
        logger.debug("title_selected", title=title, score=score, source=source,
                     candidates=len(candidates))
        return title

    return None
