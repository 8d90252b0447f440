"""Console report and YAML summary."""
from __future__ import annotations

import yaml
from rich.text import Text

from skillwisp_stats.reconcile import MISSING_SKILL_MD, ReconciliationResult, RegistryIssue
from skillwisp_stats.rewriter import RewriteOutcome
from skillwisp_stats.scanner import SOURCE_MARKER
from skillwisp_stats.stats import SkillStats

RULE = "─" * 40


def format_count_line(label: str, count: int, unit: str) -> str:
    return f"  {label:<20} {count:>3} {unit}"


def format_not_found_line(label: str) -> str:
    return f"  {label:<20} not found"


def format_paths(issues: list[RegistryIssue]) -> str:
    return ", ".join(i.path for i in issues)


def format_skill_dir_issue(issue: RegistryIssue) -> str:
    if issue.kind == MISSING_SKILL_MD:
        return f"  {issue.path} (directory has no SKILL.md)"
    return f"  {issue.path} (listed in index.yaml, no SKILL.md on disk)"


def format_rewrite(relative_path: str, outcome: RewriteOutcome) -> str:
    if outcome is RewriteOutcome.UPDATED:
        return f"  ✓ Updated: {relative_path}"
    if outcome is RewriteOutcome.MISSING:
        return f"  ⚠ File not found: {relative_path}"
    return f"  ○ No changes: {relative_path}"


class StatsReport:
    """Builds the styled console report from computed results."""

    def __init__(self, locale: str = "zh-CN", marker: str = SOURCE_MARKER):
        self.locale = locale
        self.marker = marker

    @property
    def translation_file(self) -> str:
        return f"{self.locale}.yaml"

    def render_stats(self, stats: SkillStats) -> Text:
        text = Text()
        text.append("Skills by Source:\n", style="green")
        text.append(RULE + "\n", style="dim")
        for source, skills in stats.by_source.items():
            text.append(format_count_line(f"{self.marker}{source}", len(skills), "skills") + "\n")
        text.append(RULE + "\n", style="dim")
        text.append(format_count_line("Total", stats.total_count, "skills") + "\n", style="green")
        text.append(format_count_line("Sources", stats.source_count, "sources") + "\n", style="green")
        return text

    def render_registry(self, result: ReconciliationResult, total_count: int) -> Text:
        text = Text()
        text.append("Registry Status:\n", style="cyan")
        text.append(RULE + "\n", style="dim")
        for label, count, found in (
            ("index.yaml", result.index_count, result.index_found),
            (self.translation_file, result.translation_count, result.translations_found),
        ):
            if not found:
                text.append(format_not_found_line(label) + "\n", style="yellow")
                continue
            style = "green" if count == total_count else "yellow"
            text.append(format_count_line(label, count, "entries") + "\n", style=style)
        text.append(RULE + "\n", style="dim")

        if result.is_clean:
            text.append("  ✓ All skills registered and translated\n", style="green")
            return text

        for line in self.format_findings(result):
            text.append(line + "\n", style="yellow")
        return text

    def format_findings(self, result: ReconciliationResult) -> list[str]:
        """Plain-text finding lines, grouped by kind."""
        lines = []
        if result.missing_index or result.missing_translation:
            lines.append("⚠ Missing entries:")
            if result.missing_index:
                lines.append(f"  index.yaml: {format_paths(result.missing_index)}")
            if result.missing_translation:
                lines.append(f"  {self.translation_file}: {format_paths(result.missing_translation)}")
        if result.orphaned_translation:
            lines.append(f"⚠ Orphaned entries (in {self.translation_file} but not in index.yaml):")
            lines.extend(f"  {i.path}" for i in result.orphaned_translation)
        if result.missing_skill_dir:
            lines.append("⚠ Missing skill files:")
            lines.extend(format_skill_dir_issue(i) for i in result.missing_skill_dir)
        return lines

    def render_rewrites(self, outcomes: dict[str, RewriteOutcome]) -> Text:
        text = Text()
        text.append("Updating documentation...\n", style="cyan")
        styles = {
            RewriteOutcome.UPDATED: "green",
            RewriteOutcome.UNCHANGED: "dim",
            RewriteOutcome.MISSING: "yellow",
        }
        for relative_path, outcome in outcomes.items():
            text.append(format_rewrite(relative_path, outcome) + "\n", style=styles[outcome])
        return text


def _issue_dict(issue: RegistryIssue) -> dict:
    return {"source": issue.source, "id": issue.id, "path": issue.path}


def build_summary(stats: SkillStats, result: ReconciliationResult | None = None) -> dict:
    """Plain-data summary of a run, suitable for YAML output."""
    summary: dict = {
        "total": stats.total_count,
        "sources": {source: len(skills) for source, skills in stats.by_source.items()},
    }
    if result is not None:
        summary["registry"] = {
            "index_entries": result.index_count,
            "translation_entries": result.translation_count,
            "missing_index": [_issue_dict(i) for i in result.missing_index],
            "missing_translation": [_issue_dict(i) for i in result.missing_translation],
            "orphaned_translation": [_issue_dict(i) for i in result.orphaned_translation],
            "missing_skill_dir": [
                {**_issue_dict(i), "type": i.kind} for i in result.missing_skill_dir
            ],
        }
    return summary


def dump_summary(summary: dict) -> str:
    return yaml.safe_dump(summary, allow_unicode=True, sort_keys=False)
