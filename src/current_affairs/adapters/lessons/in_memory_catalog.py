"""In-memory stand-in for the static lesson catalog."""

from typing import Optional

from current_affairs.core import LessonCatalog
from current_affairs.core.entities import Lesson, SubjectArea

SUBJECT_LESSONS: dict[SubjectArea, list[Lesson]] = {
    SubjectArea.POLITY: [
        Lesson("polity-001", "Constitutional Framework"),
        Lesson("polity-002", "Fundamental Rights"),
        Lesson("polity-003", "Parliamentary System"),
        Lesson("polity-004", "Judicial System"),
        Lesson("polity-005", "Federal Structure"),
    ],
    SubjectArea.ECONOMY: [
        Lesson("eco-001", "Economic Development"),
        Lesson("eco-002", "Money and Banking"),
        Lesson("eco-003", "Public Finance"),
        Lesson("eco-004", "International Trade"),
        Lesson("eco-005", "Agriculture and Industry"),
    ],
    SubjectArea.ENVIRONMENT: [
        Lesson("env-001", "Climate Change"),
        Lesson("env-002", "Biodiversity Conservation"),
        Lesson("env-003", "Environmental Pollution"),
        Lesson("env-004", "Sustainable Development"),
        Lesson("env-005", "Renewable Energy"),
    ],
    SubjectArea.INTERNATIONAL_RELATIONS: [
        Lesson("ir-001", "India's Foreign Policy"),
        Lesson("ir-002", "International Organizations"),
        Lesson("ir-003", "Bilateral Relations"),
        Lesson("ir-004", "Regional Groupings"),
        Lesson("ir-005", "Global Issues"),
    ],
}

TOPIC_LESSONS: dict[str, list[Lesson]] = {
    "Constitutional Framework": [
        Lesson("polity-001", "Constitutional Framework"),
        Lesson("polity-006", "Constitutional Amendments"),
    ],
    "Fundamental Rights": [
        Lesson("polity-002", "Fundamental Rights"),
        Lesson("polity-007", "Rights and Duties"),
    ],
    "Economic Development": [
        Lesson("eco-001", "Economic Development"),
        Lesson("eco-006", "Planning and Development"),
    ],
    "Climate Change": [
        Lesson("env-001", "Climate Change"),
        Lesson("env-006", "Global Environmental Issues"),
    ],
}


class InMemoryLessonCatalog(LessonCatalog):
    """Lesson lookups from fixed tables; writes are kept in memory."""

    def __init__(
        self,
        subject_lessons: Optional[dict[SubjectArea, list[Lesson]]] = None,
        topic_lessons: Optional[dict[str, list[Lesson]]] = None,
    ) -> None:
        self.subject_lessons = subject_lessons if subject_lessons is not None else SUBJECT_LESSONS
        self.topic_lessons = topic_lessons if topic_lessons is not None else TOPIC_LESSONS
        self.examples: dict[str, list[str]] = {}
        self.question_tags: dict[str, list[str]] = {}

    def get_subject_lessons(self, subject: SubjectArea) -> list[Lesson]:
        return list(self.subject_lessons.get(subject, []))

    def get_topic_lessons(self, topic: str) -> list[Lesson]:
        return list(self.topic_lessons.get(topic, []))

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        for lessons in (*self.subject_lessons.values(), *self.topic_lessons.values()):
            for lesson in lessons:
                if lesson.id == lesson_id:
                    return lesson
        return None

    def append_examples(self, lesson_id: str, examples: list[str]) -> None:
        print(f"📚 Updating lesson {lesson_id} with {len(examples)} new examples")
        if self.get_lesson(lesson_id) is None:
            print(f"  └─ ⚠️  Lesson {lesson_id} is not in the catalog, keeping examples anyway")
        self.examples.setdefault(lesson_id, []).extend(examples)

    def tag_question(self, question_id: str, refs: list[str]) -> None:
        print(f"🏷️  Tagging question {question_id} with {len(refs)} news references")
        self.question_tags.setdefault(question_id, []).extend(refs)
