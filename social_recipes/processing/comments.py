"""Ranking of recipe-like comments under a social post."""

from collections.abc import Iterable

from ..config import Settings, get_settings
from ..logging import get_logger, log_processing_stage
from ..models import ScoredComment
from .scoring import RecipeScorer, default_scorer

logger = get_logger(__name__)


class CommentRanker:
    """Keeps the few comments that carry strong recipe signals.

    With default settings a comment needs at least 20 raw characters and a
    score of 300, and at most 5 are returned. ``COMMENT_MIN_LENGTH``,
    ``COMMENT_MIN_SCORE`` and ``MAX_RECIPE_COMMENTS`` (or the keyword
    overrides) change those rules; ``validate_config`` warns when they do.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        scorer: RecipeScorer | None = None,
        *,
        min_length: int | None = None,
        min_score: float | None = None,
        max_comments: int | None = None,
    ):
        settings = settings or get_settings()
        self.scorer = scorer or default_scorer
        self.min_length = settings.comment_min_length if min_length is None else min_length
        self.min_score = settings.comment_min_score if min_score is None else min_score
        self.max_comments = (
            settings.max_recipe_comments if max_comments is None else max_comments
        )

    def score_comments(self, comments: Iterable[str | None] | None) -> list[ScoredComment]:
        """Score the comments long enough to hold a recipe, in input order.

        The length gate and the scorer both see the raw comment, so emoji and
        hashtag density count exactly as posted.
        """
        return [
            ScoredComment(text=comment, score=self.scorer.score(comment))
            for comment in comments or ()
            if comment and len(comment) >= self.min_length
        ]

    def rank(self, comments: Iterable[str | None] | None) -> list[str]:
        """Return the top recipe-like comments, best first.

        Args:
            comments: Raw comment texts; None entries are skipped

        Returns:
            At most ``max_comments`` comment texts scoring ``min_score`` or more
        """
        comments = list(comments or ())
        scored = self.score_comments(comments)
        qualified = [c for c in scored if c.score >= self.min_score]

        # Stable sort keeps input order for equal scores
        qualified.sort(key=lambda c: c.score, reverse=True)
        ranked = [c.text for c in qualified[: self.max_comments]]

        logger.debug(
            "comments_ranked",
            **log_processing_stage(
                "comment_ranking",
                input_count=len(comments),
                output_count=len(ranked),
                qualified=len(qualified),
            ),
        )
        return ranked


def extract_recipe_comments(
    comments: Iterable[str | None] | None,
    settings: Settings | None = None,
) -> list[str]:
    """Convenience function for comment ranking."""
    return CommentRanker(settings).rank(comments)
