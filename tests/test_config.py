"""Tests for configuration module."""

import pytest

from social_recipes.config import (
    DEFAULT_COMMENT_RULES,
    Settings,
    get_settings,
    validate_config,
)


def test_settings_defaults():
    """Default thresholds match the ranking rules."""
    settings = Settings()

    assert settings.comment_min_length == 20
    assert settings.comment_min_score == 300
    assert settings.max_recipe_comments == 5
    assert settings.recipe_score_threshold == 300


def test_settings_from_environment(monkeypatch):
    """Environment variables override defaults."""
    monkeypatch.setenv("COMMENT_MIN_LENGTH", "10")
    monkeypatch.setenv("MAX_RECIPE_COMMENTS", "3")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings()

    assert settings.comment_min_length == 10
    assert settings.max_recipe_comments == 3
    assert settings.log_level == "WARNING"


def test_settings_length_validation():
    """Negative length gates are rejected."""
    with pytest.raises(ValueError, match="Comment minimum length must not be negative"):
        Settings(comment_min_length=-1)


def test_settings_max_comments_validation():
    """At least one comment must be allowed."""
    with pytest.raises(ValueError, match="At least one recipe comment must be returned"):
        Settings(max_recipe_comments=0)


def test_settings_log_level_validation():
    """Unknown log levels are rejected."""
    with pytest.raises(ValueError, match="Unknown log level"):
        Settings(log_level="LOUD")


def test_get_settings_is_shared():
    """The process-wide settings instance is reused."""
    assert get_settings() is get_settings()


def test_config_validation():
    """Valid settings pass and non-positive thresholds fail."""
    assert validate_config(Settings()) is True
    assert validate_config(Settings(comment_min_score=0)) is False
    assert validate_config(Settings(recipe_score_threshold=-5)) is False


def test_config_validation_warns_on_changed_comment_rules(capsys):
    """Changing a comment rule passes validation but is reported."""
    assert validate_config(Settings()) is True
    assert "Warning" not in capsys.readouterr().out

    assert validate_config(Settings(comment_min_length=5)) is True
    out = capsys.readouterr().out
    assert "comment_min_length=5 overrides the default comment rule (20)" in out


def test_default_comment_rules():
    """The default settings carry the documented comment rules."""
    settings = Settings()

    assert DEFAULT_COMMENT_RULES == {
        "comment_min_length": 20,
        "comment_min_score": 300,
        "max_recipe_comments": 5,
    }
    for name, value in DEFAULT_COMMENT_RULES.items():
        assert getattr(settings, name) == value
