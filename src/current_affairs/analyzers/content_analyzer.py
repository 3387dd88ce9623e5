"""Study material extraction from relevance-scored news."""

import dataclasses
import re
from datetime import datetime, timezone
from typing import Optional

from current_affairs.analyzers.keywords import contains_any, normalize_text
from current_affairs.analyzers.question_generator import QuestionGenerator
from current_affairs.analyzers.relevance_filter import PROCESSING_VERSION
from current_affairs.core import taxonomy
from current_affairs.core.entities import (
    Fact,
    MainsPaper,
    MainsRelevance,
    NewsAnalysis,
    NewsItem,
    NewsSource,
    ProbableQuestions,
    ProcessedNewsItem,
    ProcessingMetadata,
    RelevanceLevel,
    StaticConnection,
    SubjectArea,
    Summary,
)

SUMMARY_WORD_LIMIT = 300
MAX_KEY_POINTS = 7
MAX_FACTS = 8
MAX_CONNECTIONS = 5
MAX_PYQS = 5
CONTEXT_WINDOW = 30

SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

GOVERNMENT_ACTION_PATTERNS = [
    re.compile(r"cabinet\s+approved[^.]+", re.IGNORECASE),
    re.compile(r"government\s+launched[^.]+", re.IGNORECASE),
    re.compile(r"ministry\s+announced[^.]+", re.IGNORECASE),
    re.compile(r"scheme\s+aims[^.]+", re.IGNORECASE),
]

FIGURE_PATTERNS = [
    re.compile(r"Rs?\s?[\d,]+\s?(crore|lakh|billion|million)", re.IGNORECASE),
    re.compile(r"\d+\.?\d*\s?%"),
    re.compile(r"\d+\s?(GW|MW|MT|MMT)", re.IGNORECASE),
    re.compile(r"\$\s?[\d,]+\s?(billion|million)", re.IGNORECASE),
]
DATE_PATTERN = re.compile(r"\d{4}[-\s]([\d]{2}|[\w]+)[-\s]\d{1,2}")
RANKING_PATTERN = re.compile(r"(first|second|third|fourth|largest|biggest|top\s\d+)", re.IGNORECASE)
PERCENT_PATTERN = re.compile(r"\d+\.?\d*\s?%")

EDITORIAL_TRIGGERS = ["impact", "significance", "challenge", "implication"]
ECONOMIC_TRIGGERS = ["crore", "policy", "growth"]
ENVIRONMENT_TRIGGERS = ["climate", "emission", "conservation", "sustainable"]

BACKGROUND_TEMPLATES = {
    SubjectArea.POLITY: (
        "This development relates to India's constitutional and political framework. "
        "Understanding the constitutional provisions, institutional mechanisms, and "
        "democratic processes is essential to grasp the full implications. "
        "The issue connects with principles of governance, federalism, and rule of law."
    ),
    SubjectArea.ECONOMY: (
        "This economic development must be understood in the context of India's "
        "growth trajectory and policy framework. Key economic concepts like "
        "fiscal management, monetary policy, and structural reforms provide the "
        "theoretical foundation for analyzing such developments."
    ),
    SubjectArea.ENVIRONMENT: (
        "Environmental issues require understanding of ecological principles, "
        "climate science, and sustainable development concepts. India's commitments "
        "under international agreements and national policies form the backdrop "
        "for such developments."
    ),
    SubjectArea.INTERNATIONAL_RELATIONS: (
        "International relations involve complex interplay of national interests, "
        "diplomatic strategies, and global governance mechanisms. Understanding "
        "India's foreign policy principles and regional dynamics is crucial."
    ),
}
GENERAL_BACKGROUND = (
    "This development reflects broader trends in governance and policy-making. "
    "It connects with multiple aspects of the UPSC syllabus and requires "
    "interdisciplinary understanding."
)

PRELIMS_ANGLE = (
    "Key facts, figures, and timelines mentioned. Focus on specific provisions, "
    "institutional roles, and comparative aspects."
)
MAINS_ANGLE = (
    "Analytical dimensions include impact assessment, stakeholder analysis, "
    "challenges in implementation, and way forward. Links to broader themes "
    "of governance, development, and social justice."
)
INTERVIEW_ANGLE = (
    "Personal opinion on the issue, ethical dimensions, and practical "
    "solutions from an administrator's perspective."
)


class ContentAnalyzer:
    """Turn a ProcessedNewsItem into a full NewsAnalysis."""

    def __init__(
        self,
        question_generator: Optional[QuestionGenerator] = None,
        now: Optional[datetime] = None,
    ) -> None:
        self.question_generator = question_generator or QuestionGenerator()
        self.now = now

    def categorize_news(self, item: NewsItem) -> ProcessedNewsItem:
        """Quick keyword categorisation of a raw item, bypassing the relevance filter."""
        text = normalize_text(item.title, item.content)

        primary = taxonomy.DEFAULT_SUBJECT
        for subject, keywords in taxonomy.QUICK_PRIMARY_RULES:
            if contains_any(text, keywords):
                primary = subject
                break

        secondary = [
            subject
            for subject, keywords in taxonomy.QUICK_SECONDARY_KEYWORDS.items()
            if contains_any(text, keywords)
        ][:3]

        topics: list[str] = []
        for keyword, mapped in taxonomy.QUICK_TOPIC_MAP.items():
            if keyword in text:
                topics.extend(mapped)
        topics = list(dict.fromkeys(topics))[:5]

        return ProcessedNewsItem(
            item=item,
            relevance_score=75,
            primary_subject=primary,
            secondary_subjects=secondary,
            syllabus_topics=topics,
            prelims_relevance=RelevanceLevel.HIGH,
            mains_relevance=MainsRelevance(
                papers=[MainsPaper.GS2, MainsPaper.GS3],
                level=RelevanceLevel.MEDIUM,
            ),
            question_probability=70,
            metadata=ProcessingMetadata(
                processed_at=self.now or datetime.now(timezone.utc),
                version=PROCESSING_VERSION,
                confidence=0.85,
            ),
        )

    def generate_analysis(self, news: ProcessedNewsItem) -> NewsAnalysis:
        """Build summary, key points, facts, context, connections and questions."""
        if not isinstance(news, ProcessedNewsItem):
            raise ValueError(
                f"generate_analysis expects a ProcessedNewsItem, got {type(news).__name__}"
            )

        draft = NewsAnalysis(
            news_item=news,
            summary=self.generate_summary(news),
            key_points=self.extract_key_points(news),
            facts=self.extract_facts(news),
            background_context=self.generate_background(news),
            upsc_angle=self.generate_upsc_angle(news),
            static_connections=self.identify_static_connections(news),
            questions=ProbableQuestions(),
            related_pyqs=self.find_related_pyqs(news),
        )

        return dataclasses.replace(draft, questions=self.create_questions(draft))

    def create_questions(self, analysis: NewsAnalysis) -> ProbableQuestions:
        return self.question_generator.create_questions(analysis)

    # Summary

    def generate_summary(self, news: ProcessedNewsItem) -> Summary:
        """Two-minute read: lead, context, relevance and takeaways, at most 300 words."""
        sections = [
            news.title,
            self._lead_sentences(news.content),
            self._context_paragraph(news),
            self._relevance_paragraph(news),
            self._takeaways_paragraph(news),
        ]
        text = "\n\n".join(sections)

        words = text.split()
        if len(words) > SUMMARY_WORD_LIMIT:
            text = " ".join(words[:SUMMARY_WORD_LIMIT]) + "..."

        return Summary(two_minute_read=text, word_count=len(text.split()))

    def _lead_sentences(self, content: str) -> str:
        sentences = SENTENCE_PATTERN.findall(content)
        return " ".join(sentences[:2]).strip()

    def _context_paragraph(self, news: ProcessedNewsItem) -> str:
        return (
            f"This development is significant in the context of {news.primary_subject.value}. "
            f"It reflects the government's focus on {' and '.join(news.syllabus_topics)}. "
            "The timing is crucial given recent developments in this sector."
        )

    def _relevance_paragraph(self, news: ProcessedNewsItem) -> str:
        papers = ", ".join(paper.value for paper in news.mains_relevance.papers)
        return (
            f"From UPSC perspective, this news is highly relevant for {papers}. "
            f"It connects with fundamental concepts of {news.primary_subject.value} "
            "and has implications for policy analysis. "
            "Candidates should understand both the immediate impact and long-term consequences."
        )

    def _takeaways_paragraph(self, news: ProcessedNewsItem) -> str:
        return (
            "Key takeaways: Understanding this development helps in answering questions on "
            f"{', '.join(news.syllabus_topics)}. It exemplifies the practical application of "
            "theoretical concepts and provides contemporary examples for answer writing."
        )

    # Key points

    def extract_key_points(self, news: ProcessedNewsItem) -> list[str]:
        """Source-specific key point extraction, at most seven points."""
        content = news.content

        if news.source == NewsSource.PIB:
            points = [
                match.group(0).strip()
                for pattern in GOVERNMENT_ACTION_PATTERNS
                for match in pattern.finditer(content)
            ]
        elif news.source in (NewsSource.THE_HINDU, NewsSource.INDIAN_EXPRESS):
            points = self._sentences_with(content, lambda s: contains_any(s, EDITORIAL_TRIGGERS))
        elif news.source == NewsSource.ECONOMIC_TIMES:
            points = self._sentences_with(
                content,
                lambda s: PERCENT_PATTERN.search(s) is not None or contains_any(s, ECONOMIC_TRIGGERS),
            )
        elif news.source == NewsSource.DOWN_TO_EARTH:
            points = self._sentences_with(content, lambda s: contains_any(s, ENVIRONMENT_TRIGGERS))
        else:
            points = []

        return points[:MAX_KEY_POINTS]

    def _sentences_with(self, content: str, predicate) -> list[str]:
        points = []
        for sentence in content.split("."):
            stripped = sentence.strip()
            if stripped and predicate(stripped.lower()):
                points.append(stripped)
        return points

    # Facts

    def extract_facts(self, news: ProcessedNewsItem) -> list[Fact]:
        """Figures, dates and rankings found in the body, at most eight."""
        content = news.content
        facts: list[Fact] = []

        for pattern in FIGURE_PATTERNS:
            for match in pattern.finditer(content):
                figure = match.group(0).strip()
                facts.append(Fact(
                    fact=figure,
                    source=news.source,
                    importance=self._figure_importance(figure, news),
                ))

        for match in DATE_PATTERN.finditer(content):
            facts.append(Fact(
                fact=f"Timeline: {match.group(0)}",
                source=news.source,
                importance=RelevanceLevel.MEDIUM,
            ))

        for match in RANKING_PATTERN.finditer(content):
            start = max(0, match.start() - CONTEXT_WINDOW)
            end = min(len(content), match.end() + CONTEXT_WINDOW)
            facts.append(Fact(
                fact=f"...{content[start:end].strip()}...",
                source=news.source,
                importance=RelevanceLevel.HIGH,
            ))

        return facts[:MAX_FACTS]

    def _figure_importance(self, figure: str, news: ProcessedNewsItem) -> RelevanceLevel:
        if "crore" in figure or "billion" in figure:
            return RelevanceLevel.HIGH
        if "first" in figure or "largest" in figure:
            return RelevanceLevel.HIGH
        if news.relevance_score > 80:
            return RelevanceLevel.HIGH
        return RelevanceLevel.MEDIUM

    # Prose

    def generate_background(self, news: ProcessedNewsItem) -> str:
        return BACKGROUND_TEMPLATES.get(news.primary_subject, GENERAL_BACKGROUND)

    def generate_upsc_angle(self, news: ProcessedNewsItem) -> str:
        angle = "UPSC Perspective:\n\n"
        angle += f"Prelims Focus: {PRELIMS_ANGLE}\n\n"
        angle += f"Mains Relevance: {MAINS_ANGLE}\n\n"
        if news.relevance_score > 80:
            angle += f"Interview Connect: {INTERVIEW_ANGLE}"
        return angle

    # Connections and references

    def identify_static_connections(self, news: ProcessedNewsItem) -> list[StaticConnection]:
        """Keyword-triggered links to static topics plus one subject default."""
        content = news.content.lower()

        connections = [
            StaticConnection(topic=topic, subject=subject, connection=description)
            for triggers, topic, subject, description in taxonomy.STATIC_CONNECTION_RULES
            if contains_any(content, triggers)
        ]

        topic, description = taxonomy.SUBJECT_DEFAULT_CONNECTIONS.get(
            news.primary_subject, taxonomy.GENERAL_DEFAULT_CONNECTION
        )
        connections.append(StaticConnection(
            topic=topic, subject=news.primary_subject, connection=description
        ))

        return connections[:MAX_CONNECTIONS]

    def find_related_pyqs(self, news: ProcessedNewsItem) -> list[str]:
        pyqs = list(taxonomy.PYQ_BY_SUBJECT.get(news.primary_subject, [taxonomy.GENERIC_PYQ]))

        content = news.content.lower()
        for keyword, reference in taxonomy.PYQ_BY_KEYWORD.items():
            if keyword in content:
                pyqs.append(reference)

        return pyqs[:MAX_PYQS]
