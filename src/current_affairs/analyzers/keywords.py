"""Shared keyword matching utilities for analyzers."""


def normalize_text(title: str, content: str) -> str:
    """Lowercased "title content" string every keyword check runs against."""
    return f"{title} {content}".lower()


def count_matches(text: str, keywords: list[str]) -> int:
    """
    Count how many keywords occur in text.

    Matching is plain substring containment, so "act" also hits "impact".
    Each keyword counts at most once regardless of repetitions.

    Args:
        text: Already lowercased text
        keywords: Lowercase keywords

    Returns:
        Number of distinct keywords found
    """
    return sum(1 for keyword in keywords if keyword in text)


def count_matches_with_tags(text: str, tags: list[str], keywords: list[str]) -> int:
    """Count keywords found in text or contained in any tag."""
    lowered_tags = [tag.lower() for tag in tags]
    return sum(
        1
        for keyword in keywords
        if keyword in text or any(keyword in tag for tag in lowered_tags)
    )


def contains_any(text: str, keywords: list[str]) -> bool:
    return any(keyword in text for keyword in keywords)
