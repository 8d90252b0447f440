from pathlib import Path

from skillwisp_stats.scanner import ScanResult, SkillEntry, scan_skills
from skillwisp_stats.stats import build_stats, group_by_source


def _entry(source: str, skill_id: str) -> SkillEntry:
    return SkillEntry(source=source, id=skill_id, file_path=Path("SKILL.md"), name=skill_id, description="")


def test_build_stats_fixture(fixtures_dir):
    stats = build_stats(scan_skills(fixtures_dir / "skills"))
    assert stats.total_count == 3
    assert stats.source_count == 2
    assert list(stats.by_source) == ["anthropic", "community"]
    assert [e.id for e in stats.by_source["anthropic"]] == ["docx", "pdf"]


def test_group_by_source_sorted():
    groups = group_by_source([_entry("zeta", "a"), _entry("alpha", "b"), _entry("zeta", "c")])
    assert list(groups) == ["alpha", "zeta"]
    assert [e.id for e in groups["zeta"]] == ["a", "c"]


def test_empty_scan():
    stats = build_stats(ScanResult())
    assert stats.total_count == 0
    assert stats.source_count == 0
    assert stats.by_source == {}
