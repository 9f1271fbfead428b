"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["JSON_LOGGING"] = "false"


@pytest.fixture
def recipe_caption():
    """Caption of a post that shares a full recipe."""
    return (
        "Garlic Butter Shrimp 🍤\n"
        "Ingredients:\n"
        "- 1 lb shrimp\n"
        "- 4 cloves garlic\n"
        "- 2 tbsp butter\n"
        "Steps:\n"
        "1. Melt the butter\n"
        "2. Cook the shrimp"
    )


@pytest.fixture
def promo_caption():
    """Caption of a post that only promotes an event."""
    return "New merch drop!! Tour tickets on sale now, link in bio 🎉"


@pytest.fixture
def sample_post(recipe_caption):
    """Raw text sources of a scraped recipe post."""
    return {
        "caption": recipe_caption + " #shrimp #dinner https://example.com/p/1",
        "text": "garlic shrimp overlay",
        "pageTitle": "Garlic Butter Shrimp | TikTok",
        "comments": [
            "so good!!",
            None,
            "My version: Ingredients - 2 cups rice, 1 tsp salt, 3 eggs",
            "#yum",
        ],
    }
