"""Bridge between pipeline output and the static lesson catalog."""

from current_affairs.core import LessonCatalog
from current_affairs.core.entities import (
    EnhancedLesson,
    ExamType,
    Lesson,
    LessonLink,
    LessonSection,
    NewsAnalysis,
    QuestionBank,
    QuestionBankEntry,
    StaticConnection,
    SubjectArea,
)

MAX_LINKS = 10
MAX_RECENT_DEVELOPMENTS = 5

# (connection topic fragment, lesson id, relevance prefix)
CONNECTION_LESSONS = [
    ("Constitution", "polity-001", "Direct connection"),
    ("Economic", "eco-001", "Related concept"),
]


class IntegrationService:
    """Link analyses to lessons and build enhanced lessons and question banks."""

    def __init__(self, catalog: LessonCatalog) -> None:
        self.catalog = catalog

    def link_to_static_content(self, analysis: NewsAnalysis) -> list[LessonLink]:
        """Candidate lessons ranked High, Medium, Low; first occurrence of a lesson wins."""
        news = analysis.news_item
        candidates = list(self.catalog.get_subject_lessons(news.primary_subject))
        for topic in news.syllabus_topics:
            candidates.extend(self.catalog.get_topic_lessons(topic))

        links = [
            LessonLink(
                lesson_id=lesson.id,
                lesson_title=lesson.title,
                relevance=self.calculate_relevance(analysis, lesson),
            )
            for lesson in candidates
        ]
        for connection in analysis.static_connections:
            links.extend(self._connection_links(connection))

        links.sort(key=lambda link: relevance_rank(link.relevance), reverse=True)

        unique: list[LessonLink] = []
        seen: set[str] = set()
        for link in links:
            if link.lesson_id not in seen:
                seen.add(link.lesson_id)
                unique.append(link)
        return unique[:MAX_LINKS]

    def calculate_relevance(self, analysis: NewsAnalysis, lesson: Lesson) -> str:
        """
        Grade how closely a lesson matches an analysis.

        Title word overlap scores 20 per word, a syllabus topic contained in the
        lesson title adds 30, and each static-connection topic contained in the
        lesson title adds 15.

        Returns:
            "High relevance: ..." at 70 or more, "Medium relevance: ..." at 40
            or more, otherwise a generic low-relevance label
        """
        news = analysis.news_item
        lesson_title = lesson.title.lower()
        score = 0
        reasons: list[str] = []

        news_words = news.title.lower().split(" ")
        common = [word for word in lesson_title.split(" ") if word in news_words]
        if common:
            score += len(common) * 20
            reasons.append(f"Title match: {', '.join(common)}")

        if any(topic.lower() in lesson_title for topic in news.syllabus_topics):
            score += 30
            reasons.append("Topic alignment")

        concepts = sum(
            1 for connection in analysis.static_connections if connection.topic.lower() in lesson_title
        )
        if concepts:
            score += concepts * 15
            reasons.append("Concept overlap")

        reason = "; ".join(reasons)
        if score >= 70:
            return f"High relevance: {reason}"
        if score >= 40:
            return f"Medium relevance: {reason}"
        return f"Low relevance: General {news.primary_subject.value} connection"

    def _connection_links(self, connection: StaticConnection) -> list[LessonLink]:
        links = []
        for fragment, lesson_id, prefix in CONNECTION_LESSONS:
            if fragment not in connection.topic:
                continue
            lesson = self.catalog.get_lesson(lesson_id)
            if lesson is None:
                continue
            links.append(LessonLink(
                lesson_id=lesson.id,
                lesson_title=lesson.title,
                relevance=f"{prefix}: {connection.connection}",
            ))
        return links

    def update_lessons_with_examples(self, lesson_id: str, examples: list[str]) -> None:
        self.catalog.append_examples(lesson_id, examples)

    def tag_questions_with_current_affairs(self, question_id: str, refs: list[str]) -> None:
        self.catalog.tag_question(question_id, refs)

    def generate_enhanced_lesson(self, lesson_id: str, analyses: list[NewsAnalysis]) -> EnhancedLesson:
        return EnhancedLesson(
            lesson_id=lesson_id,
            sections=[
                LessonSection("Recent Developments", self._recent_developments(analyses)),
                LessonSection("Contemporary Examples", self._contemporary_examples(analyses)),
                LessonSection("Current Affairs in Exams", self._exam_perspective(analyses)),
            ],
        )

    def _recent_developments(self, analyses: list[NewsAnalysis]) -> str:
        lines = ["Recent developments related to this topic:", ""]
        for index, analysis in enumerate(analyses[:MAX_RECENT_DEVELOPMENTS], 1):
            news = analysis.news_item
            published = news.published_at.date().isoformat() if news.published_at else "-"
            key_point = analysis.key_points[0] if analysis.key_points else news.title
            lines.append(f"{index}. {news.title}")
            lines.append(f"   Date: {published}")
            lines.append(f"   Key Point: {key_point}")
            lines.append(f"   UPSC Relevance: {analysis.upsc_angle[:100]}...")
            lines.append("")
        return "\n".join(lines)

    def _contemporary_examples(self, analyses: list[NewsAnalysis]) -> str:
        lines = ["Use these contemporary examples in your answers:", ""]
        for analysis in analyses:
            if not analysis.facts:
                continue
            lines.append(f"• {analysis.news_item.title}:")
            for fact in analysis.facts[:3]:
                lines.append(f"  - {fact.fact} ({fact.importance.value})")
            lines.append("")
        return "\n".join(lines)

    def _exam_perspective(self, analyses: list[NewsAnalysis]) -> str:
        lines = ["How this topic might appear in exams:", "", "Prelims Focus:"]
        prelims = [q for analysis in analyses for q in analysis.questions.prelims][:3]
        for index, question in enumerate(prelims, 1):
            lines.append(f"{index}. {question.question[:100]}...")

        lines.extend(["", "Mains Focus:"])
        mains = [q for analysis in analyses for q in analysis.questions.mains][:2]
        for index, question in enumerate(mains, 1):
            lines.append(f"{index}. {question.question}")
        return "\n".join(lines)

    def create_question_bank(self, analyses: list[NewsAnalysis]) -> QuestionBank:
        """Flatten every generated question, with subject and exam-type counts."""
        entries: list[QuestionBankEntry] = []
        for analysis in analyses:
            news = analysis.news_item
            for question in analysis.questions.prelims:
                entries.append(QuestionBankEntry(
                    id=question.id,
                    question=question.question,
                    type=ExamType.PRELIMS,
                    subject=news.primary_subject,
                    news_source=news.title,
                ))
            for question in analysis.questions.mains:
                entries.append(QuestionBankEntry(
                    id=question.id,
                    question=question.question,
                    type=ExamType.MAINS,
                    subject=news.primary_subject,
                    news_source=news.title,
                ))

        by_subject: dict[SubjectArea, int] = {}
        by_type: dict[ExamType, int] = {ExamType.PRELIMS: 0, ExamType.MAINS: 0}
        for entry in entries:
            by_subject[entry.subject] = by_subject.get(entry.subject, 0) + 1
            by_type[entry.type] += 1

        return QuestionBank(
            total_questions=len(entries),
            by_subject=by_subject,
            by_type=by_type,
            questions=entries,
        )


def relevance_rank(relevance: str) -> int:
    if relevance.startswith("High"):
        return 3
    if relevance.startswith("Medium"):
        return 2
    return 1
