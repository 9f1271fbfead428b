"""Tests for main text selection."""

from social_recipes.config import Settings
from social_recipes.models import ContentResult, RawTextSources, TitleSources
from social_recipes.processing.content import (
    SocialContentProcessor,
    analyze_post,
    process_social_content,
)
from social_recipes.processing.scoring import score_recipe_content


class RecordingExtractor:
    """Title extractor stub that remembers its input."""

    def __init__(self, title=None):
        self.title = title
        self.calls: list[TitleSources] = []

    def __call__(self, sources: TitleSources):
        self.calls.append(sources)
        return self.title


def test_caption_wins_over_text():
    """The caption is the main text when both are present."""
    result = process_social_content(
        RawTextSources(caption="A", text="B", page_title=None, comments=[])
    )

    assert result.main_text == "A"


def test_text_used_without_caption():
    """Overlay text is used when there is no caption."""
    result = process_social_content({"caption": None, "text": "B", "comments": []})

    assert result.main_text == "B"


def test_caption_that_cleans_to_empty_falls_back_to_text():
    """A caption of only hashtags does not count as a caption."""
    result = process_social_content({"caption": "#food #yum", "text": "Lemon bars"})

    assert result.main_text == "Lemon bars"


def test_missing_sources():
    """No sources at all still yields a result."""
    for sources in (None, {}, RawTextSources()):
        result = process_social_content(sources)

        assert result.main_text == ""
        assert result.comments == []
        assert result.score == 0
        assert result.title is None


def test_comments_cleaned_and_empties_dropped():
    """Comments are normalized, empties removed, order kept."""
    result = process_social_content({
        "caption": "x",
        "comments": ["#yum", "  great   recipe ", None, "https://x.com", "second one"],
    })

    assert result.comments == ["great recipe", "second one"]


def test_score_is_main_text_score(sample_post):
    """The score belongs to the cleaned main text."""
    result = process_social_content(sample_post)

    assert "#shrimp" not in result.main_text
    assert "https://" not in result.main_text
    assert result.score == score_recipe_content(result.main_text)
    assert result.score > 1000


def test_title_extractor_receives_cleaned_sources():
    """The title extractor gets cleaned values and no description."""
    extractor = RecordingExtractor(title="Lemon Bars")
    processor = SocialContentProcessor(title_extractor=extractor)

    result = processor.process({
        "caption": "Lemon  Bars #dessert",
        "text": "overlay https://x.com",
        "pageTitle": "@baker Lemon Bars",
    })

    assert result.title == "Lemon Bars"
    assert extractor.calls == [
        TitleSources(
            caption="Lemon Bars",
            text="overlay",
            page_title="Lemon Bars",
            description=None,
        )
    ]


def test_default_title_extractor(sample_post):
    """The built-in extractor prefers the cleaned page title here."""
    result = process_social_content(sample_post)

    assert result.title == "Garlic Butter Shrimp"


def test_result_serializes_with_aliases(sample_post):
    """Results use camelCase keys when dumped by alias."""
    dumped = process_social_content(sample_post).model_dump(by_alias=True)

    assert set(dumped) == {"title", "mainText", "comments", "score"}
    assert ContentResult.model_validate(dumped).main_text == dumped["mainText"]


def test_analyze_post(sample_post):
    """Post analysis combines content and ranked raw comments."""
    analysis = analyze_post(sample_post)

    assert analysis.recipe_detected is True
    assert analysis.recipe_comments == [
        "My version: Ingredients - 2 cups rice, 1 tsp salt, 3 eggs",
    ]
    assert analysis.content.comments == [
        "so good!!",
        "My version: Ingredients - 2 cups rice, 1 tsp salt, 3 eggs",
    ]


def test_analyze_post_threshold():
    """Detection follows the configured threshold."""
    settings = Settings(recipe_score_threshold=10_000)

    assert analyze_post({"caption": "Ingredients: 2 cups flour"}, settings).recipe_detected is False
    assert analyze_post({"caption": "Ingredients: 2 cups flour"}).recipe_detected is True
