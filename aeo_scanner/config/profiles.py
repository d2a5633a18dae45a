"""Scoring threshold profiles for the AEO rule checks."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnswerExtractionThresholds:
    """Points and cutoffs for the answer extraction check (max 30)."""
    h1_points: int = 8
    question_points: int = 4
    definition_short_length: int = 150
    definition_long_length: int = 300
    definition_full_points: int = 12
    definition_partial_points: int = 6
    definition_minimal_points: int = 2
    explanatory_points: int = 6
    pass_threshold: int = 18

    @property
    def max_points(self) -> int:
        return (
            self.h1_points
            + self.question_points
            + self.definition_full_points
            + self.explanatory_points
        )


@dataclass(frozen=True)
class ContentStructureThresholds:
    """Points and cutoffs for the content structure check (max 25)."""
    h2_high_count: int = 4
    h2_medium_count: int = 2
    h2_high_points: int = 12
    h2_medium_points: int = 8
    h2_low_points: int = 4
    h3_bonus_count: int = 2
    h3_bonus_points: int = 3
    list_high_count: int = 2
    list_high_points: int = 10
    list_medium_points: int = 5
    pass_threshold: int = 15

    @property
    def max_points(self) -> int:
        return self.h2_high_points + self.h3_bonus_points + self.list_high_points


@dataclass(frozen=True)
class SchemaMarkupThresholds:
    """Points for the page-type aware schema markup check (max 25)."""
    max_points: int = 25
    homepage_match_points: int = 25
    homepage_default_points: int = 20
    article_match_points: int = 15
    article_partial_points: int = 5
    article_faq_points: int = 10
    article_faq_partial_points: int = 3
    recipe_match_points: int = 25
    product_match_points: int = 25
    product_partial_points: int = 10
    generic_present_points: int = 20
    generic_missing_points: int = 10
    top_up_floor: int = 12
    top_up_points: int = 5
    pass_threshold: int = 12


@dataclass(frozen=True)
class InternalLinkingThresholds:
    """Points and cutoffs for the internal linking check (max 10)."""
    max_points: int = 10
    full_count: int = 3
    full_points: int = 10
    partial_points: int = 5
    none_points: int = 0
    pass_threshold: int = 7


@dataclass(frozen=True)
class CrawlabilityThresholds:
    """Points for each crawlability sub-check."""
    status_points: int = 3
    indexable_points: int = 3
    canonical_points: int = 2
    title_points: int = 2
    pass_threshold: int = 6

    @property
    def max_points(self) -> int:
        return (
            self.status_points
            + self.indexable_points
            + self.canonical_points
            + self.title_points
        )


@dataclass(frozen=True)
class ScoringProfile:
    """Complete set of thresholds used by one analysis run."""
    name: str
    answer_extraction: AnswerExtractionThresholds = field(default_factory=AnswerExtractionThresholds)
    content_structure: ContentStructureThresholds = field(default_factory=ContentStructureThresholds)
    schema_markup: SchemaMarkupThresholds = field(default_factory=SchemaMarkupThresholds)
    internal_linking: InternalLinkingThresholds = field(default_factory=InternalLinkingThresholds)
    crawlability: CrawlabilityThresholds = field(default_factory=CrawlabilityThresholds)


STRICT_PROFILE = ScoringProfile(name="strict")

LENIENT_PROFILE = ScoringProfile(
    name="lenient",
    answer_extraction=AnswerExtractionThresholds(
        h1_points=10,
        question_points=5,
        definition_short_length=250,
        definition_long_length=400,
        definition_full_points=10,
        definition_partial_points=6,
        definition_minimal_points=3,
        explanatory_points=5,
        pass_threshold=15,
    ),
    content_structure=ContentStructureThresholds(
        h2_high_points=12,
        h2_medium_points=9,
        h2_low_points=5,
        list_high_points=10,
        list_medium_points=6,
        pass_threshold=13,
    ),
    schema_markup=SchemaMarkupThresholds(
        generic_present_points=22,
        generic_missing_points=12,
        pass_threshold=10,
    ),
    internal_linking=InternalLinkingThresholds(
        partial_points=6,
        none_points=2,
        pass_threshold=6,
    ),
    crawlability=CrawlabilityThresholds(
        status_points=5,
        indexable_points=5,
        canonical_points=5,
        title_points=5,
        pass_threshold=6,
    ),
)

PROFILES: dict[str, ScoringProfile] = {
    STRICT_PROFILE.name: STRICT_PROFILE,
    LENIENT_PROFILE.name: LENIENT_PROFILE,
}


def get_profile(name: str) -> ScoringProfile:
    """Look up a scoring profile by name.

    Raises:
        ValueError: If no profile with that name exists
    """
    try:
        return PROFILES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ValueError(f"Unknown scoring profile '{name}' (expected one of: {known})") from None
