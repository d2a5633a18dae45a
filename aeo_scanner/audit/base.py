"""Base classes for the AEO check framework."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from aeo_scanner.config.profiles import ScoringProfile
from aeo_scanner.parser.document import HtmlDocument


class PageType(Enum):
    """Kind of page being analyzed; drives page-type aware scoring."""
    HOMEPAGE = "homepage"
    ARTICLE = "article"
    RECIPE = "recipe"
    PRODUCT = "product"
    FAQ = "faq"
    CONTENT = "content"


@dataclass
class CheckResult:
    """Result of a single rule check.

    Attributes:
        check_id: Unique identifier of the check that produced this result
        title: Human-readable name of the check
        points: Points earned, never above max_points
        max_points: Maximum points the check can award
        passed: Whether points reached the check's pass threshold
        details: Findings, in the order they were evaluated
        recommendations: Suggested fixes, without duplicates
        is_optional: Optional checks never feed the recommendation list
    """
    check_id: str
    title: str
    points: int
    max_points: int
    passed: bool
    details: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    is_optional: bool = False

    def __post_init__(self):
        if self.max_points <= 0:
            raise ValueError(f"{self.check_id}: max_points must be positive")
        if not 0 <= self.points <= self.max_points:
            raise ValueError(
                f"{self.check_id}: points {self.points} outside 0..{self.max_points}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "points": self.points,
            "maxPoints": self.max_points,
            "pass": self.passed,
            "details": list(self.details),
            "recommendations": list(self.recommendations),
            "isOptional": self.is_optional,
        }


@dataclass(frozen=True)
class AuditContext:
    """Page metadata shared by all checks of one analysis."""
    url: str
    final_url: str
    status_code: int
    headers: Mapping[str, str | None]
    page_type: PageType
    profile: ScoringProfile

    def header(self, name: str) -> str | None:
        """Case-insensitive response header lookup."""
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None


class BaseCheck(ABC):
    """Abstract base class for all rule checks.

    Subclasses must implement:
    - check_id: Unique identifier
    - title: Human-readable name
    - run(): Execute the check and return a CheckResult
    """

    @property
    @abstractmethod
    def check_id(self) -> str:
        """Unique identifier for this check."""
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        """Human-readable name of this check."""
        pass

    @abstractmethod
    def run(self, document: HtmlDocument, context: AuditContext) -> CheckResult:
        """Execute the check.

        Args:
            document: Parsed page
            context: URL, status, headers, page type and scoring profile

        Returns:
            CheckResult with findings
        """
        pass


class Findings:
    """Mutable accumulator used while a check is running."""

    def __init__(self):
        self.points = 0
        self.details: list[str] = []
        self.recommendations: list[str] = []

    def award(self, points: int, detail: str | None = None) -> None:
        self.points += points
        if detail:
            self.details.append(detail)

    def note(self, detail: str) -> None:
        self.details.append(detail)

    def recommend(self, recommendation: str) -> None:
        if recommendation not in self.recommendations:
            self.recommendations.append(recommendation)
