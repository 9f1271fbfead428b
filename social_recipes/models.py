"""Data models shared by the recipe content engine."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


class RawTextSources(BaseModel):
    """Raw text scraped from a social post. Every field is optional."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    caption: str | None = None
    text: str | None = None
    page_title: str | None = Field(None, alias="pageTitle")
    comments: list[str | None] | None = None


class ContentResult(BaseModel):
    """Selected main text, cleaned comments, detected title and score."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    main_text: str = Field("", alias="mainText")
    comments: list[str] = Field(default_factory=list)
    score: float = 0


class PostAnalysis(BaseModel):
    """Content result plus the recipe-like comments of the same post."""

    model_config = ConfigDict(populate_by_name=True)

    content: ContentResult
    recipe_comments: list[str] = Field(default_factory=list, alias="recipeComments")
    recipe_detected: bool = Field(False, alias="recipeDetected")


@dataclass(frozen=True)
class TitleSources:
    """Input record handed to a title extractor."""
    caption: str | None = None
    text: str | None = None
    page_title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ScoredComment:
    """A comment paired with its recipe score while ranking."""
    text: str
    score: float


@dataclass(frozen=True)
class SignalContribution:
    """Points one signal added to (or removed from) a score."""
    name: str
    hits: float
    points: float


@dataclass(frozen=True)
class ScoreBreakdown:
    """Complete scoring breakdown for a block of text."""
    total: float
    contributions: tuple[SignalContribution, ...] = field(default_factory=tuple)

    @property
    def reasoning(self) -> str:
        """Readable summary of the signals that fired."""
        parts = [
            f"{c.name}: {c.points:+g}"
            for c in self.contributions
            if c.points
        ]
        return " | ".join(parts) if parts else "no signals"
