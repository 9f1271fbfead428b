"""Tests for recipe title detection."""

import pytest

from social_recipes.models import TitleSources
from social_recipes.processing.titles import (
    clean_page_title,
    extract_recipe_title,
    find_title_in_text,
    score_title_candidate,
)


@pytest.mark.parametrize("text,expected", [
    ("Shrimp Scampi", 80),
    ("Follow me for more recipes", -10),
    ("Preheat the oven", -50),
    ("ab", -100),
    (None, -100),
    ("Best pasta https://x.co", -100),
    ("Pasta by @chef", -50),
    ("Pasta #dinner", -50),
    ("Homemade Lasagna", 110),
    ("Lasagna", -10),
    ("Lasagna on TikTok", 0),
])
def test_score_title_candidate(text, expected):
    """Title candidates are scored by shape and vocabulary."""
    assert score_title_candidate(text) == expected


def test_find_title_prefers_quoted_phrase():
    """A quoted phrase that looks like a title wins."""
    assert find_title_in_text('Trying "Lemon Bars" today') == "Lemon Bars"


def test_find_title_skips_quoted_instructions():
    """Quoted instructions are ignored in favor of lines."""
    text = 'Shrimp Scampi\nthen "stir well" and serve'

    assert find_title_in_text(text) == "Shrimp Scampi"


def test_find_title_picks_best_line():
    """The best scoring line is returned."""
    text = "so hungry today\nShrimp Scampi\n1 lb shrimp"

    assert find_title_in_text(text) == "Shrimp Scampi"
    assert find_title_in_text("") is None
    assert find_title_in_text("follow for more") is None


def test_clean_page_title():
    """Platform suffixes and author prefixes are stripped."""
    assert clean_page_title("Garlic Butter Shrimp | TikTok") == "Garlic Butter Shrimp"
    assert clean_page_title("chef_anna on Instagram: Lemon Bars") == "Lemon Bars"
    assert clean_page_title("Lemon Bars") == "Lemon Bars"


def test_extract_prefers_caption_bonus():
    """The caption bonus breaks close calls in its favor."""
    sources = TitleSources(
        caption="Shrimp Scampi\n1 lb shrimp",
        page_title="Easy Shrimp Scampi",
    )

    assert extract_recipe_title(sources) == "Shrimp Scampi"


def test_extract_uses_page_title():
    """The page title is used when the caption has no title."""
    sources = TitleSources(
        caption="so good omg",
        page_title="Garlic Butter Shrimp | TikTok",
    )

    assert extract_recipe_title(sources) == "Garlic Butter Shrimp"


def test_extract_uses_text_and_description():
    """Overlay text and description are also searched."""
    assert extract_recipe_title(TitleSources(text="Crispy Tofu Bowl")) == "Crispy Tofu Bowl"
    assert extract_recipe_title(TitleSources(description="Crispy Tofu Bowl")) == "Crispy Tofu Bowl"


def test_extract_returns_none_without_candidates():
    """Nothing title-like gives None."""
    assert extract_recipe_title(TitleSources()) is None
    assert extract_recipe_title(TitleSources(caption="Follow for more!!")) is None
