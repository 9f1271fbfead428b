"""Configuration management for the social recipe extractor."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Comment ranking rules: 20 raw characters, score 300, top 5
DEFAULT_COMMENT_RULES = {
    "comment_min_length": 20,
    "comment_min_score": 300,
    "max_recipe_comments": 5,
}


class Settings(BaseSettings):
    """Main application settings."""

    # ── Comment Ranking ────────────────────────────────────────────────────
    comment_min_length: int = Field(
        DEFAULT_COMMENT_RULES["comment_min_length"],
        description="Minimum raw length for a comment to be considered",
    )
    comment_min_score: float = Field(
        DEFAULT_COMMENT_RULES["comment_min_score"],
        description="Minimum recipe score for a comment to be kept",
    )
    max_recipe_comments: int = Field(
        DEFAULT_COMMENT_RULES["max_recipe_comments"],
        description="Maximum ranked comments returned",
    )

    # ── Detection ──────────────────────────────────────────────────────────
    recipe_score_threshold: float = Field(
        300, description="Main text score at which a post is reported as a recipe"
    )

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = Field("INFO", description="Log level")
    json_logging: bool = Field(True, description="Enable JSON logging")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("comment_min_length")
    @classmethod
    def validate_min_length(cls, v: int) -> int:
        """Validate the comment length gate."""
        if v < 0:
            raise ValueError("Comment minimum length must not be negative")
        return v

    @field_validator("max_recipe_comments")
    @classmethod
    def validate_max_comments(cls, v: int) -> int:
        """Validate the ranked comment limit."""
        if v < 1:
            raise ValueError("At least one recipe comment must be returned")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a stdlib level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def validate_config(settings: Settings) -> bool:
    """Validate configuration completeness."""
    try:
        if settings.comment_min_score <= 0:
            raise ValueError("comment_min_score must be positive to filter comments")

        if settings.recipe_score_threshold <= 0:
            raise ValueError("recipe_score_threshold must be positive")

        for name, default in DEFAULT_COMMENT_RULES.items():
            value = getattr(settings, name)
            if value != default:
                print(f"Warning: {name}={value} overrides the default comment rule ({default})")

        return True

    except ValueError as e:
        print(f"Configuration validation failed: {e}")
        return False


if __name__ == "__main__":
    # Configuration validation
    if validate_config(get_settings()):
        print("✅ Configuration is valid")
    else:
        print("❌ Configuration validation failed")
        exit(1)
