"""Core domain entities.

Entities are frozen dataclasses: fields cannot be reassigned. List and dict
fields are not copied, so a list handed to an entity is shared with it. Build
a new list (or use ``dataclasses.replace``) instead of mutating one in place.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class NewsSource(str, Enum):
    """Publisher an article was ingested from."""

    PIB = "PIB"
    THE_HINDU = "TheHindu"
    INDIAN_EXPRESS = "IndianExpress"
    ECONOMIC_TIMES = "EconomicTimes"
    DOWN_TO_EARTH = "DownToEarth"


class SubjectArea(str, Enum):
    """Syllabus subject taxonomy."""

    POLITY = "Polity"
    ECONOMY = "Economy"
    GEOGRAPHY = "Geography"
    HISTORY = "History"
    ENVIRONMENT = "Environment"
    SCIENCE_TECH = "Science & Technology"
    INTERNATIONAL_RELATIONS = "International Relations"
    SOCIAL_ISSUES = "Social Issues"
    ART_CULTURE = "Art & Culture"
    ETHICS = "Ethics"


class MainsPaper(str, Enum):
    """Mains examination paper."""

    GS1 = "GS1"
    GS2 = "GS2"
    GS3 = "GS3"
    GS4 = "GS4"
    ESSAY = "Essay"


class RelevanceLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class ExamType(str, Enum):
    PRELIMS = "Prelims"
    MAINS = "Mains"
    BOTH = "Both"


class ThemeImportance(str, Enum):
    """Importance tier of a recurring theme."""

    CRITICAL = "Critical"
    IMPORTANT = "Important"
    MODERATE = "Moderate"


class TopicImportance(str, Enum):
    """Importance tier of a weekly trending topic."""

    CRITICAL = "Critical"
    HIGH = "High"
    MODERATE = "Moderate"


@dataclass(frozen=True)
class NewsItem:
    """Raw ingested article."""

    id: str
    source: NewsSource
    title: str
    content: str
    published_at: Optional[datetime]
    url: str
    tags: list[str] = field(default_factory=list)
    author: Optional[str] = None
    image_url: Optional[str] = None
    original_length: int = 0


@dataclass(frozen=True)
class ScoreBreakdown:
    """Relevance sub-scores, each already clamped to its cap."""

    syllabus_match: int
    government_policy: int
    constitutional_importance: int
    international_impact: int
    economic_implications: int
    environmental_significance: int
    historical_precedent: int

    @property
    def total(self) -> int:
        return min(
            self.syllabus_match
            + self.government_policy
            + self.constitutional_importance
            + self.international_impact
            + self.economic_implications
            + self.environmental_significance
            + self.historical_precedent,
            100,
        )


@dataclass(frozen=True)
class MainsRelevance:
    papers: list[MainsPaper]
    level: RelevanceLevel


@dataclass(frozen=True)
class ProcessingMetadata:
    processed_at: datetime
    version: str
    confidence: float


@dataclass(frozen=True)
class ProcessedNewsItem:
    """News item promoted by the relevance filter, with derived exam fields."""

    item: NewsItem
    relevance_score: int
    primary_subject: SubjectArea
    secondary_subjects: list[SubjectArea]
    syllabus_topics: list[str]
    prelims_relevance: RelevanceLevel
    mains_relevance: MainsRelevance
    question_probability: float
    metadata: ProcessingMetadata

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def title(self) -> str:
        return self.item.title

    @property
    def content(self) -> str:
        return self.item.content

    @property
    def source(self) -> NewsSource:
        return self.item.source

    @property
    def published_at(self) -> Optional[datetime]:
        return self.item.published_at

    @property
    def tags(self) -> list[str]:
        return self.item.tags


@dataclass(frozen=True)
class Summary:
    two_minute_read: str
    word_count: int


@dataclass(frozen=True)
class Fact:
    """Extracted fact or figure."""

    fact: str
    source: NewsSource
    importance: RelevanceLevel


@dataclass(frozen=True)
class StaticConnection:
    """Link between a news item and a static syllabus topic."""

    topic: str
    subject: SubjectArea
    connection: str


@dataclass(frozen=True)
class PrelimsQuestion:
    """Objective question with exactly four options."""

    id: str
    question: str
    options: list[str]
    correct_answer: int
    explanation: str
    difficulty: Difficulty
    topic: str

    def __post_init__(self) -> None:
        if len(self.options) != 4:
            raise ValueError(f"Question {self.id} must have exactly 4 options, got {len(self.options)}")
        if not 0 <= self.correct_answer < 4:
            raise ValueError(f"Question {self.id} has invalid correct answer index {self.correct_answer}")


@dataclass(frozen=True)
class MainsQuestion:
    """Descriptive question with model answer outline."""

    id: str
    question: str
    word_limit: int
    paper: MainsPaper
    marks: int
    model_answer_points: list[str]
    approach: str


@dataclass(frozen=True)
class ProbableQuestions:
    prelims: list[PrelimsQuestion] = field(default_factory=list)
    mains: list[MainsQuestion] = field(default_factory=list)


@dataclass(frozen=True)
class NewsAnalysis:
    """Study material generated for one processed news item."""

    news_item: ProcessedNewsItem
    summary: Summary
    key_points: list[str]
    facts: list[Fact]
    background_context: str
    upsc_angle: str
    static_connections: list[StaticConnection]
    questions: ProbableQuestions
    related_pyqs: list[str]


@dataclass(frozen=True)
class ImportantUpdates:
    government: list[str] = field(default_factory=list)
    economy: list[str] = field(default_factory=list)
    international: list[str] = field(default_factory=list)
    environment: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DailyCompilation:
    """Daily brief built from one day's analyses."""

    brief_date: date
    top_stories: list[NewsAnalysis]
    quiz: list[PrelimsQuestion]
    brief_summary: str
    important_updates: ImportantUpdates
    total_processed: int
    total_selected: int


@dataclass(frozen=True)
class TrendingTopic:
    topic: str
    frequency: int
    importance: TopicImportance


@dataclass(frozen=True)
class RevisionNote:
    subject: SubjectArea
    points: list[str]


@dataclass(frozen=True)
class PredictedTopic:
    topic: str
    probability: float
    reasoning: str


@dataclass(frozen=True)
class WeeklyCompilation:
    """Roll-up of a week of daily briefs."""

    week_number: int
    start_date: Optional[date]
    end_date: Optional[date]
    highlights: list[str]
    trending_topics: list[TrendingTopic]
    consolidated_quiz: list[PrelimsQuestion]
    mains_topics: list[MainsQuestion]
    revision_notes: list[RevisionNote]
    predicted_topics: list[PredictedTopic]


@dataclass(frozen=True)
class RecurringTheme:
    theme: str
    occurrences: int
    news_items: list[str]
    importance: ThemeImportance


@dataclass(frozen=True)
class EmergingTopic:
    topic: str
    growth_rate: float
    first_appeared: datetime
    predicted_importance: str


@dataclass(frozen=True)
class ExamPrediction:
    topic: str
    exam_type: ExamType
    probability: float
    reasoning: str


@dataclass(frozen=True)
class TrendAnalysis:
    """Trend view over a window of analyses."""

    period_start: datetime
    period_end: datetime
    recurring_themes: list[RecurringTheme]
    emerging_topics: list[EmergingTopic]
    subject_distribution: dict[SubjectArea, int]
    source_distribution: dict[NewsSource, int]
    exam_predictions: list[ExamPrediction]


@dataclass(frozen=True)
class Lesson:
    """Static lesson record from the lesson catalog."""

    id: str
    title: str


@dataclass(frozen=True)
class LessonLink:
    lesson_id: str
    lesson_title: str
    relevance: str


@dataclass(frozen=True)
class LessonSection:
    title: str
    content: str


@dataclass(frozen=True)
class EnhancedLesson:
    lesson_id: str
    sections: list[LessonSection]


@dataclass(frozen=True)
class QuestionBankEntry:
    id: str
    question: str
    type: ExamType
    subject: SubjectArea
    news_source: str


@dataclass(frozen=True)
class QuestionBank:
    """Cross-referenced question bank built from a batch of analyses."""

    total_questions: int
    by_subject: dict[SubjectArea, int]
    by_type: dict[ExamType, int]
    questions: list[QuestionBankEntry]
