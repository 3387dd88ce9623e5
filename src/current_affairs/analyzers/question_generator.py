"""Practice question generation for analysed news."""

import re

from current_affairs.core.entities import (
    Difficulty,
    Fact,
    MainsPaper,
    MainsQuestion,
    NewsAnalysis,
    PrelimsQuestion,
    ProbableQuestions,
    ProcessedNewsItem,
    StaticConnection,
)

DEFAULT_TOPIC = "Current Affairs"
DEFAULT_FACT = "Key development announced"
DEFAULT_STATIC_TOPIC = "Constitutional Framework"

STATEMENT_OPTIONS = ["1 only", "2 only", "Both 1 and 2", "Neither 1 nor 2"]
MATCH_OPTIONS = ["A-1, B-2, C-3", "A-2, B-3, C-1", "A-3, B-1, C-2", "A-1, B-3, C-2"]
GENERIC_MATCH_ITEMS = ["Announcing authority", "Key figure", "Implementation timeline"]
FALLBACK_DISTRACTORS = [
    "The measure was deferred to the next financial year",
    "The proposal applies only to Union Territories",
    "The announcement was withdrawn after consultation",
]
NONE_OF_THE_ABOVE = "None of the above"

ANALYTICAL_APPROACH = (
    "Start with context, analyze multiple dimensions, provide balanced view with examples, "
    "suggest practical solutions"
)
CRITICAL_APPROACH = (
    "Present both sides objectively, use facts and examples, maintain critical perspective, "
    "conclude with balanced view"
)


def _inflate_number(match: re.Match) -> str:
    inflated = round(int(match.group(0)) * 1.2, 1)
    if inflated == int(inflated):
        return str(int(inflated))
    return str(inflated)


def generate_distractor(correct: str, kind: str) -> str:
    """
    Build a wrong option from the correct one.

    Deterministic for a given (correct, kind) pair.

    Args:
        correct: Text of the correct option
        kind: One of numerical, conceptual, opposite, related, unrelated

    Returns:
        Distractor text; unknown kinds yield a generic placeholder
    """
    if kind == "numerical":
        return re.sub(r"\d+", _inflate_number, correct)
    if kind == "conceptual":
        return re.sub(r"development|growth|increase", "decline", correct, flags=re.IGNORECASE)
    if kind == "opposite":
        return re.sub(r"approved|launched|increased", "rejected", correct, flags=re.IGNORECASE)
    if kind == "related":
        return "Related Constitutional Provision"
    if kind == "unrelated":
        return "Historical Evolution"
    return "Alternative option"


def distinct_options(correct: str, distractors: list[str], closing: str) -> list[str]:
    """Correct answer first, two distinct distractors, then the closing option.

    Distractors that repeat the answer, each other or the closing option are
    replaced from FALLBACK_DISTRACTORS.
    """
    options = [correct]
    for candidate in distractors + FALLBACK_DISTRACTORS:
        if len(options) == 3:
            break
        if candidate not in options and candidate != closing:
            options.append(candidate)
    options.append(closing)
    return options


class QuestionGenerator:
    """Generate five prelims and two mains questions per analysis."""

    def create_questions(self, analysis: NewsAnalysis) -> ProbableQuestions:
        news = analysis.news_item
        if news is None:
            raise ValueError("Cannot generate questions: analysis has no news item")

        return ProbableQuestions(
            prelims=self.generate_prelims(news, analysis),
            mains=self.generate_mains(news, analysis),
        )

    def generate_prelims(
        self, news: ProcessedNewsItem, analysis: NewsAnalysis
    ) -> list[PrelimsQuestion]:
        return [
            self._fact_based(news, analysis.facts),
            self._statement_based(news, analysis.key_points),
            self._match_following(news, analysis.facts),
            self._application_based(news, analysis.upsc_angle),
            self._static_linked(news, analysis.static_connections),
        ]

    def generate_mains(
        self, news: ProcessedNewsItem, analysis: NewsAnalysis
    ) -> list[MainsQuestion]:
        papers = news.mains_relevance.papers
        first_topic = news.syllabus_topics[0] if news.syllabus_topics else DEFAULT_TOPIC

        analytical = MainsQuestion(
            id=f"mains-{news.id}-1",
            question=(
                f"Analyze the implications of {news.title} on India's "
                f"{news.primary_subject.value.lower()} landscape. Discuss the challenges "
                "and suggest measures for effective implementation. (250 words)"
            ),
            word_limit=250,
            paper=papers[0] if papers else MainsPaper.GS2,
            marks=15,
            model_answer_points=[
                f"Introduction: Brief context of {news.title}",
                "Key provisions/features of the development",
                f"Positive implications: {'; '.join(analysis.key_points[:2])}",
                "Challenges: Implementation issues, resource constraints, coordination",
                "Way forward: Policy recommendations, best practices",
                "Conclusion: Balanced assessment with future outlook",
            ],
            approach=ANALYTICAL_APPROACH,
        )

        if len(papers) > 1:
            critical_paper = papers[1]
        elif papers:
            critical_paper = papers[0]
        else:
            critical_paper = MainsPaper.GS3

        lead_point = analysis.key_points[0] if analysis.key_points else news.title
        critical = MainsQuestion(
            id=f"mains-{news.id}-2",
            question=(
                f"Critically evaluate the {news.title} in the context of {first_topic}. "
                "What are the potential benefits and concerns? (150 words)"
            ),
            word_limit=150,
            paper=critical_paper,
            marks=10,
            model_answer_points=[
                "Introduction: Overview of the issue",
                f"Arguments in favor: {lead_point}",
                "Arguments against: Potential drawbacks or limitations",
                "Balanced perspective: Weighing pros and cons",
                "Conclusion: Overall assessment",
            ],
            approach=CRITICAL_APPROACH,
        )

        return [analytical, critical]

    def _topic(self, news: ProcessedNewsItem) -> str:
        return news.syllabus_topics[0] if news.syllabus_topics else DEFAULT_TOPIC

    def _fact_based(self, news: ProcessedNewsItem, facts: list[Fact]) -> PrelimsQuestion:
        correct = facts[0].fact if facts else DEFAULT_FACT

        return PrelimsQuestion(
            id=f"prelims-{news.id}-1",
            question=f"According to recent developments in {news.title}, which of the following is correct?",
            options=distinct_options(
                correct,
                [generate_distractor(correct, "numerical"), generate_distractor(correct, "conceptual")],
                NONE_OF_THE_ABOVE,
            ),
            correct_answer=0,
            explanation=(
                "The correct answer is based on the official announcement/data. "
                f"{correct} is the accurate figure/fact."
            ),
            difficulty=Difficulty.EASY,
            topic=self._topic(news),
        )

    def _statement_based(self, news: ProcessedNewsItem, key_points: list[str]) -> PrelimsQuestion:
        points = list(key_points[:2])
        if not points:
            points.append(news.title)
        if len(points) < 2:
            points.append(f"The development is relevant to {news.primary_subject.value}")

        statements = "\n".join(f"{i}. {point}" for i, point in enumerate(points, 1))

        return PrelimsQuestion(
            id=f"prelims-{news.id}-2",
            question=(
                f"Consider the following statements:\n{statements}\n\n"
                "Which of the above statements is/are correct?"
            ),
            options=list(STATEMENT_OPTIONS),
            correct_answer=2,
            explanation="Both statements are correct as per the recent development.",
            difficulty=Difficulty.MEDIUM,
            topic=self._topic(news),
        )

    def _match_following(self, news: ProcessedNewsItem, facts: list[Fact]) -> PrelimsQuestion:
        # Generic pairs unless the item yielded enough figures to match against
        if len(facts) >= 4:
            items = [fact.fact for fact in facts[:3]]
        else:
            items = GENERIC_MATCH_ITEMS

        listing = "\n".join(f"{letter}. {text}" for letter, text in zip("ABC", items))

        return PrelimsQuestion(
            id=f"prelims-{news.id}-3",
            question=f"Match the following aspects of the recent development:\n{listing}",
            options=list(MATCH_OPTIONS),
            correct_answer=0,
            explanation="The correct matching is based on the factual information provided.",
            difficulty=Difficulty.MEDIUM,
            topic=self._topic(news),
        )

    def _application_based(self, news: ProcessedNewsItem, upsc_angle: str) -> PrelimsQuestion:
        return PrelimsQuestion(
            id=f"prelims-{news.id}-4",
            question=f"The recent {news.title} is significant because:",
            options=distinct_options(
                upsc_angle[:100],
                [generate_distractor(upsc_angle, "conceptual"), generate_distractor(upsc_angle, "opposite")],
                "It has no major policy implications",
            ),
            correct_answer=0,
            explanation="The significance lies in its policy implications and broader impact.",
            difficulty=Difficulty.HARD,
            topic=self._topic(news),
        )

    def _static_linked(
        self, news: ProcessedNewsItem, connections: list[StaticConnection]
    ) -> PrelimsQuestion:
        connection = connections[0] if connections else None
        subject = connection.subject if connection else news.primary_subject
        topic = connection.topic if connection else DEFAULT_STATIC_TOPIC

        return PrelimsQuestion(
            id=f"prelims-{news.id}-5",
            question=f"The {news.title} relates to which fundamental concept in {subject.value}?",
            options=distinct_options(
                topic,
                [generate_distractor(topic, "related"), generate_distractor(topic, "unrelated")],
                NONE_OF_THE_ABOVE,
            ),
            correct_answer=0,
            explanation=f"This development directly connects with {topic} in the UPSC syllabus.",
            difficulty=Difficulty.MEDIUM,
            topic=connection.topic if connection else self._topic(news),
        )
