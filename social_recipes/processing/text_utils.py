"""Text processing utilities for social media captions and comments."""

import re


URL_PATTERN = re.compile(r'https?://[^\s<>]+')

HANDLE_PATTERN = re.compile(r'[@#][\w._-]+')

BULLET_PATTERN = re.compile(
    '['
    '\N{BULLET}'
    '\N{TRIANGULAR BULLET}'
    '\N{WHITE BULLET}'
    '\N{HYPHEN BULLET}'
    '\N{FIGURE DASH}'
    '\N{EN DASH}'
    '\N{EM DASH}'
    '\N{HORIZONTAL BAR}'
    ']'
)

WHITESPACE_RUN_PATTERN = re.compile(r'\s{2,}')

LINE_BREAK_PATTERN = re.compile('[\n\r\u2028\u2029]')


def clean_social_text(text: str | None) -> str:
    """Clean up text content by removing common social media cruft.

    URLs are removed before handles and hashtags so that a ``#fragment``
    inside a link is never treated as a hashtag on its own.

    Args:
        text: Raw caption, overlay text, page title or comment

    Returns:
        Normalized text (empty string for missing input)
    """
    if not text:
        return ""

    # Remove URLs
    text = URL_PATTERN.sub('', text)

    # Remove handles and hashtags
    text = HANDLE_PATTERN.sub('', text)

    # Normalize bullets and dashes
    text = BULLET_PATTERN.sub('-', text)

    # Collapse repeated whitespace
    text = WHITESPACE_RUN_PATTERN.sub(' ', text)

    return text.strip()


def split_lines(text: str) -> list[str]:
    """Split text into stripped lines, dropping blank ones.

    Args:
        text: Input text

    Returns:
        Non-empty lines in order
    """
    if not text:
        return []

    lines = (line.strip() for line in LINE_BREAK_PATTERN.split(text))
    return [line for line in lines if line]


def word_pattern(words: tuple[str, ...] | list[str]) -> re.Pattern[str]:
    """Compile a whole-word alternation for a word list."""
    # Longest first so multi-word phrases win over their prefixes
    ordered = sorted(words, key=len, reverse=True)
    return re.compile(r'\b(?:' + '|'.join(re.escape(w) for w in ordered) + r')\b')


def char_class(chars: frozenset[str] | tuple[str, ...]) -> re.Pattern[str]:
    """Compile a single character class matching any of ``chars``."""
    return re.compile('[' + ''.join(re.escape(c) for c in sorted(chars)) + ']')


if __name__ == "__main__":
    sample = "Check https://x.com/p#1 @chef #yum\n\n• 2 cups flour — sifted"
    print(f"Cleaned: {clean_social_text(sample)!r}")
