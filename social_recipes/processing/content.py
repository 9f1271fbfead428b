"""
Main text selection for social media posts.

A post arrives as several raw text sources. The caption is written by the
poster and is preferred; overlay or on-screen text is only used when the
caption is empty. The chosen block is scored, comments are cleaned, and title
detection is delegated to a pluggable title extractor.
"""

from collections.abc import Mapping
from typing import Any

from ..config import Settings, get_settings
from ..logging import get_logger
from ..models import ContentResult, PostAnalysis, RawTextSources, TitleSources
from .comments import CommentRanker
from .scoring import RecipeScorer, default_scorer
from .text_utils import clean_social_text
from .titles import TitleExtractor, extract_recipe_title

logger = get_logger(__name__)

SourcesInput = RawTextSources | Mapping[str, Any] | None


def coerce_sources(sources: SourcesInput) -> RawTextSources:
    """Accept a model, a plain mapping or None."""
    if sources is None:
        return RawTextSources()
    if isinstance(sources, RawTextSources):
        return sources
    return RawTextSources.model_validate(dict(sources))


class SocialContentProcessor:
    """Chooses and scores the main recipe candidate of a post."""

    def __init__(
        self,
        title_extractor: TitleExtractor | None = None,
        scorer: RecipeScorer | None = None,
    ):
        self.title_extractor = title_extractor or extract_recipe_title
        self.scorer = scorer or default_scorer

    def process(self, sources: SourcesInput) -> ContentResult:
        """Process social media text to extract recipe content.

        Args:
            sources: Raw caption, text, page title and comments

        Returns:
            Title, main text, cleaned comments and the main text score
        """
        raw = coerce_sources(sources)

        caption = clean_social_text(raw.caption)
        text = clean_social_text(raw.text)
        page_title = clean_social_text(raw.page_title)
        comments = [
            cleaned
            for cleaned in (clean_social_text(c) for c in raw.comments or ())
            if cleaned
        ]

        title = self.title_extractor(
            TitleSources(
                caption=caption,
                text=text,
                page_title=page_title,
                description=None,
            )
        )

        main_text = caption or text
        score = self.scorer.score(main_text)

        logger.debug(
            "content_selected",
            source="caption" if caption else ("text" if text else None),
            score=score,
            comments=len(comments),
            has_title=title is not None,
        )

        return ContentResult(
            title=title,
            main_text=main_text,
            comments=comments,
            score=score,
        )


def process_social_content(
    sources: SourcesInput,
    title_extractor: TitleExtractor | None = None,
) -> ContentResult:
    """Convenience function for content selection."""
    return SocialContentProcessor(title_extractor).process(sources)


def analyze_post(
    sources: SourcesInput,
    settings: Settings | None = None,
    title_extractor: TitleExtractor | None = None,
) -> PostAnalysis:
    """Select the main text and rank recipe-like comments for one post."""
    settings = settings or get_settings()
    raw = coerce_sources(sources)

    content = SocialContentProcessor(title_extractor).process(raw)
    recipe_comments = CommentRanker(settings).rank(raw.comments)

    return PostAnalysis(
        content=content,
        recipe_comments=recipe_comments,
        recipe_detected=content.score >= settings.recipe_score_threshold,
    )
