"""
Weighted signal scoring for recipe-like social media text.

The score is the sum of independent signals:
- Recipe structure words (ingredients, steps, recipe)
- Measurement units and quantities
- List formatting (bullets, numbering)
- Food and kitchen emoji
- Penalties for hashtag spam, promotional phrasing and bare instructions
- A capped length bonus

Signals never short-circuit each other, so weak cues in noisy captions add up
and a strongly promotional post can end up below zero.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..models import ScoreBreakdown, SignalContribution
from .lexicon import (
    FOOD_EMOJI,
    INGREDIENT_WORDS,
    INSTRUCTION_VERBS,
    KITCHEN_EMOJI,
    LIST_MARKERS,
    MEASUREMENT_UNITS,
    PROMOTIONAL_PHRASES,
    RECIPE_WORDS,
    STRUCTURE_WORDS,
    VULGAR_FRACTIONS,
)
from .text_utils import char_class, word_pattern

HASHTAG_DENSITY_LIMIT = 0.02
LENGTH_BONUS_CAP = 1000

INGREDIENT_PATTERN = word_pattern(INGREDIENT_WORDS)
STRUCTURE_PATTERN = word_pattern(STRUCTURE_WORDS)
RECIPE_WORD_PATTERN = word_pattern(RECIPE_WORDS)
UNIT_PATTERN = word_pattern(MEASUREMENT_UNITS)
QUANTITY_PATTERN = char_class(frozenset("0123456789") | VULGAR_FRACTIONS)
BULLET_LINE_PATTERN = re.compile(
    r'^\s*[' + ''.join(re.escape(m) for m in LIST_MARKERS) + ']', re.MULTILINE
)
NUMBERED_LINE_PATTERN = re.compile(r'^\s*[0-9]+[.)]', re.MULTILINE)
FOOD_EMOJI_PATTERN = char_class(FOOD_EMOJI)
KITCHEN_EMOJI_PATTERN = char_class(KITCHEN_EMOJI)
INSTRUCTION_START_PATTERN = word_pattern(INSTRUCTION_VERBS)

# (lowered, original) -> number of hits
SignalMatcher = Callable[[str, str], float]


@dataclass(frozen=True)
class RecipeSignal:
    """One weighted rule of the recipe score."""
    name: str
    points: float
    matcher: SignalMatcher

    def evaluate(self, lowered: str, original: str) -> SignalContribution:
        """Apply the rule to a text already lower-cased by the caller."""
        hits = self.matcher(lowered, original)
        return SignalContribution(name=self.name, hits=hits, points=hits * self.points)


def _searches(pattern: re.Pattern[str], *, original: bool = False) -> SignalMatcher:
    """Presence test against the lowered (default) or original text."""
    def matcher(lowered: str, text: str) -> float:
        return 1 if pattern.search(text if original else lowered) else 0
    return matcher


def _count_units(lowered: str, text: str) -> float:
    return len(UNIT_PATTERN.findall(lowered))


def _hashtag_dense(lowered: str, text: str) -> float:
    density = text.count('#') / max(1, len(text))
    return 1 if density > HASHTAG_DENSITY_LIMIT else 0


def _promotional(lowered: str, text: str) -> float:
    return 1 if any(phrase in lowered for phrase in PROMOTIONAL_PHRASES) else 0


def _instruction_start(lowered: str, text: str) -> float:
    return 1 if INSTRUCTION_START_PATTERN.match(lowered) else 0


def _length_bonus(lowered: str, text: str) -> float:
    return min(len(text), LENGTH_BONUS_CAP) / 10


# Evaluated in this order; reweighting a rule only touches this table
RECIPE_SIGNALS: tuple[RecipeSignal, ...] = (
    RecipeSignal("ingredients", 500, _searches(INGREDIENT_PATTERN)),
    RecipeSignal("structure", 360, _searches(STRUCTURE_PATTERN)),
    RecipeSignal("recipe_words", 400, _searches(RECIPE_WORD_PATTERN)),
    RecipeSignal("measurement_units", 70, _count_units),
    RecipeSignal("quantities", 80, _searches(QUANTITY_PATTERN)),
    RecipeSignal("bullet_list", 80, _searches(BULLET_LINE_PATTERN)),
    RecipeSignal("numbered_list", 90, _searches(NUMBERED_LINE_PATTERN)),
    RecipeSignal("food_emoji", 60, _searches(FOOD_EMOJI_PATTERN, original=True)),
    RecipeSignal("kitchen_emoji", 40, _searches(KITCHEN_EMOJI_PATTERN, original=True)),
    RecipeSignal("hashtag_density", -60, _hashtag_dense),
    RecipeSignal("promotional", -120, _promotional),
    RecipeSignal("instruction_start", -100, _instruction_start),
    RecipeSignal("length_bonus", 1, _length_bonus),
)


class RecipeScorer:
    """Sums the recipe signals for a block of text."""

    def __init__(self, signals: Sequence[RecipeSignal] = RECIPE_SIGNALS):
        self.signals = tuple(signals)

    def explain(self, text: str | None) -> ScoreBreakdown:
        """Score text and keep every signal's contribution."""
        if not text:
            return ScoreBreakdown(total=0.0)

        lowered = text.lower()
        contributions = tuple(
            signal.evaluate(lowered, text) for signal in self.signals
        )
        total = sum(c.points for c in contributions)
        return ScoreBreakdown(total=total, contributions=contributions)

    def score(self, text: str | None) -> float:
        """Score how recipe-like a block of text is."""
        if not text:
            return 0.0

        lowered = text.lower()
        return sum(signal.evaluate(lowered, text).points for signal in self.signals)


default_scorer = RecipeScorer()


def score_recipe_content(text: str | None) -> float:
    """Convenience function for recipe scoring."""
    return default_scorer.score(text)
