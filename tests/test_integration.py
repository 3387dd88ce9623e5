"""Tests for lesson catalog integration."""

from unittest.mock import Mock

from current_affairs.adapters.lessons import InMemoryLessonCatalog
from current_affairs.core import ExamType, SubjectArea
from current_affairs.core.entities import Lesson, StaticConnection
from current_affairs.integration import IntegrationService, relevance_rank


def constitutional_analysis(make_analysis):
    return make_analysis(
        "hindu-1",
        title="Constitutional Framework debate in Parliament",
        subject=SubjectArea.POLITY,
        topics=["Constitutional Framework"],
        connections=[
            StaticConnection(
                topic="Constitutional Framework",
                subject=SubjectArea.POLITY,
                connection="Links to constitutional provisions and amendments",
            )
        ],
    )


def test_link_to_static_content(make_analysis) -> None:
    """Test links are ranked, unique and capped."""
    service = IntegrationService(InMemoryLessonCatalog())

    links = service.link_to_static_content(constitutional_analysis(make_analysis))

    ids = [link.lesson_id for link in links]
    assert ids[0] == "polity-001"
    assert links[0].relevance == (
        "High relevance: Title match: constitutional, framework; Topic alignment; Concept overlap"
    )
    assert len(ids) == len(set(ids))
    assert len(links) <= 10
    assert "polity-006" in ids
    ranks = [relevance_rank(link.relevance) for link in links]
    assert ranks == sorted(ranks, reverse=True)


def test_link_leaves_catalog_lists_untouched(make_analysis) -> None:
    """Test linking does not extend the list handed back by the catalog."""
    subject_lessons = [Lesson("polity-001", "Constitutional Framework")]
    catalog = Mock()
    catalog.get_subject_lessons.return_value = subject_lessons
    catalog.get_topic_lessons.return_value = [Lesson("polity-002", "Current Developments")]
    service = IntegrationService(catalog)

    links = service.link_to_static_content(make_analysis("a"))

    assert subject_lessons == [Lesson("polity-001", "Constitutional Framework")]
    assert {link.lesson_id for link in links} == {"polity-001", "polity-002"}


def test_calculate_relevance_low(make_analysis) -> None:
    """Test unrelated lessons fall back to a generic label."""
    service = IntegrationService(InMemoryLessonCatalog())

    relevance = service.calculate_relevance(
        constitutional_analysis(make_analysis), Lesson("x", "Money and Banking")
    )

    assert relevance == "Low relevance: General Polity connection"


def test_catalog_writes_are_delegated() -> None:
    """Test lesson and question updates go to the catalog."""
    catalog = Mock()
    service = IntegrationService(catalog)

    service.update_lessons_with_examples("polity-001", ["example"])
    service.tag_questions_with_current_affairs("q-1", ["hindu-1"])

    catalog.append_examples.assert_called_once_with("polity-001", ["example"])
    catalog.tag_question.assert_called_once_with("q-1", ["hindu-1"])


def test_in_memory_catalog_keeps_examples(capsys) -> None:
    """Test the in-memory catalog records writes and warns on unknown lessons."""
    catalog = InMemoryLessonCatalog()

    catalog.append_examples("polity-001", ["a", "b"])
    catalog.append_examples("nope-001", ["c"])

    assert catalog.examples == {"polity-001": ["a", "b"], "nope-001": ["c"]}
    assert "not in the catalog" in capsys.readouterr().out
    assert catalog.get_lesson("eco-002") == Lesson("eco-002", "Money and Banking")


def test_generate_enhanced_lesson(make_analysis) -> None:
    """Test enhanced lessons have three sections."""
    service = IntegrationService(InMemoryLessonCatalog())

    lesson = service.generate_enhanced_lesson("polity-001", [constitutional_analysis(make_analysis)])

    assert lesson.lesson_id == "polity-001"
    assert [s.title for s in lesson.sections] == [
        "Recent Developments",
        "Contemporary Examples",
        "Current Affairs in Exams",
    ]
    assert "1. Constitutional Framework debate in Parliament" in lesson.sections[0].content
    assert "   Date: 2024-09-01" in lesson.sections[0].content


def test_create_question_bank(make_analysis) -> None:
    """Test the bank flattens every question with counts."""
    service = IntegrationService(InMemoryLessonCatalog())
    analyses = [
        make_analysis("a", subject=SubjectArea.POLITY),
        make_analysis("b", subject=SubjectArea.ECONOMY),
    ]

    bank = service.create_question_bank(analyses)

    assert bank.total_questions == 14
    assert bank.by_type == {ExamType.PRELIMS: 10, ExamType.MAINS: 4}
    assert bank.by_subject == {SubjectArea.POLITY: 7, SubjectArea.ECONOMY: 7}
    assert bank.questions[0].news_source == "Story a"
