from pathlib import Path

import yaml

from skillwisp_stats.manifests import load_registry
from skillwisp_stats.reconcile import (
    MISSING_SKILL_DIR,
    MISSING_SKILL_MD,
    ReconciliationResult,
    RegistryIssue,
    reconcile,
)
from skillwisp_stats.report import (
    StatsReport,
    build_summary,
    dump_summary,
    format_count_line,
    format_not_found_line,
    format_rewrite,
    format_skill_dir_issue,
)
from skillwisp_stats.rewriter import RewriteOutcome
from skillwisp_stats.scanner import ScanResult, SkillEntry, scan_skills
from skillwisp_stats.stats import SkillStats, build_stats


def _fixture_run(fixtures_dir):
    skills_root = fixtures_dir / "skills"
    scan = scan_skills(skills_root)
    result = reconcile(scan, load_registry(fixtures_dir / "registry", "zh-CN"), skills_root)
    return build_stats(scan), result


def test_format_count_line():
    assert format_count_line("@anthropic", 12, "skills") == "  @anthropic            12 skills"


def test_format_rewrite():
    assert "Updated: README.md" in format_rewrite("README.md", RewriteOutcome.UPDATED)
    assert "No changes: README.md" in format_rewrite("README.md", RewriteOutcome.UNCHANGED)
    assert "File not found: docs/skills.md" in format_rewrite("docs/skills.md", RewriteOutcome.MISSING)


def test_format_skill_dir_issue_kinds():
    dir_issue = RegistryIssue(MISSING_SKILL_DIR, "foo", "a", "@foo/a")
    md_issue = RegistryIssue(MISSING_SKILL_MD, "foo", "b", "@foo/b")
    assert "index.yaml" in format_skill_dir_issue(dir_issue)
    assert "directory has no SKILL.md" in format_skill_dir_issue(md_issue)


def test_render_stats(fixtures_dir):
    stats, _ = _fixture_run(fixtures_dir)
    text = StatsReport().render_stats(stats).plain
    assert "@anthropic" in text
    assert "  2 skills" in text
    assert format_count_line("Total", 3, "skills") in text
    assert format_count_line("Sources", 2, "sources") in text


def test_render_registry_highlights_findings(fixtures_dir):
    stats, result = _fixture_run(fixtures_dir)
    text = StatsReport().render_registry(result, stats.total_count)
    assert "index.yaml" in text.plain
    assert "zh-CN.yaml" in text.plain
    styles = {str(span.style) for span in text.spans}
    assert "yellow" in styles


def test_findings_lines(fixtures_dir):
    _, result = _fixture_run(fixtures_dir)
    lines = StatsReport().format_findings(result)
    assert "  index.yaml: @community/git-flow" in lines
    assert "  zh-CN.yaml: @anthropic/docx" in lines
    assert "  @community/stale" in lines
    assert any("@anthropic/removed" in line for line in lines)
    assert any("@community/broken-skill" in line for line in lines)


def test_findings_use_locale_file_name(fixtures_dir):
    _, result = _fixture_run(fixtures_dir)
    lines = StatsReport(locale="ja-JP").format_findings(result)
    assert "  ja-JP.yaml: @anthropic/docx" in lines


def test_render_registry_clean():
    result = ReconciliationResult(index_count=2, translation_count=2)
    text = StatsReport().render_registry(result, total_count=2)
    assert "All skills registered and translated" in text.plain
    assert StatsReport().format_findings(result) == []


def test_render_rewrites():
    outcomes = {"README.md": RewriteOutcome.UPDATED, "docs/skills.md": RewriteOutcome.UNCHANGED}
    text = StatsReport().render_rewrites(outcomes).plain
    assert "Updated: README.md" in text
    assert "No changes: docs/skills.md" in text


def test_build_summary_without_registry(fixtures_dir):
    stats, _ = _fixture_run(fixtures_dir)
    summary = build_summary(stats)
    assert summary == {"total": 3, "sources": {"anthropic": 2, "community": 1}}


def test_dump_summary_round_trips(fixtures_dir):
    stats, result = _fixture_run(fixtures_dir)
    loaded = yaml.safe_load(dump_summary(build_summary(stats, result)))
    registry = loaded["registry"]
    assert registry["index_entries"] == 3
    assert registry["missing_index"] == [{"source": "community", "id": "git-flow", "path": "@community/git-flow"}]
    assert [d["type"] for d in registry["missing_skill_dir"]] == ["skillDir", "missingSkillMd"]


def test_render_registry_missing_translation_file(fixtures_dir, tmp_path):
    result = reconcile(ScanResult(), load_registry(fixtures_dir / "registry", "ja-JP"), tmp_path)
    text = StatsReport(locale="ja-JP").render_registry(result, total_count=0).plain
    assert format_not_found_line("ja-JP.yaml") in text
    assert format_count_line("index.yaml", 3, "entries") in text


def test_render_stats_uses_marker():
    entry = SkillEntry(source="team", id="tool", file_path=Path("SKILL.md"), name="tool", description="", marker="+")
    stats = SkillStats(by_source={"team": [entry]})
    text = StatsReport(marker="+").render_stats(stats).plain
    assert format_count_line("+team", 1, "skills") in text
    assert "@team" not in text
