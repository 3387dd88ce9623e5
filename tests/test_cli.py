"""Tests for the CLI demo run."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from current_affairs.cli import async_run


@pytest.mark.asyncio
async def test_async_run_saves_documents(capsys) -> None:
    """Test a seeded demo run prints the report and writes every document."""
    with TemporaryDirectory() as tmpdir:
        output_dir = Path(tmpdir) / "out"
        config = Path(tmpdir) / "config.yaml"
        config.write_text(
            "sources:\n"
            "  reference_date: 2024-09-08\n"
            "paths:\n"
            f"  output_dir: {output_dir.as_posix()}\n",
            encoding="utf-8",
        )

        await async_run(config, seed=42, save=True)

        saved = sorted(path.name for path in output_dir.iterdir())
        feed = (output_dir / "feed.xml").read_text(encoding="utf-8")

    assert saved == [
        "daily_report.txt",
        "feed.xml",
        "revision_notes.txt",
        "weekly_quiz.txt",
        "weekly_report.txt",
    ]
    assert "<rss" in feed
    out = capsys.readouterr().out
    assert "📰 LATEST DAILY BRIEF" in out
    assert "✅ DONE!" in out
