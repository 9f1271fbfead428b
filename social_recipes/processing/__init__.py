"""Recipe content processing module."""

from .comments import CommentRanker, extract_recipe_comments
from .content import SocialContentProcessor, analyze_post, process_social_content
from .scoring import RECIPE_SIGNALS, RecipeScorer, RecipeSignal, score_recipe_content
from .text_utils import clean_social_text
from .titles import extract_recipe_title, score_title_candidate

__all__ = [
    'clean_social_text',
    'score_recipe_content',
    'RecipeScorer',
    'RecipeSignal',
    'RECIPE_SIGNALS',
    'process_social_content',
    'analyze_post',
    'SocialContentProcessor',
    'extract_recipe_comments',
    'CommentRanker',
    'extract_recipe_title',
    'score_title_candidate',
]
