"""Per-source skill counts."""
from dataclasses import dataclass, field

from skillwisp_stats.scanner import ScanResult, SkillEntry


@dataclass(frozen=True)
class SkillStats:
    """Skills grouped by source, sorted by source name."""
    by_source: dict[str, list[SkillEntry]] = field(default_factory=dict)

    @property
    def total_count(self) -> int:
        return sum(len(skills) for skills in self.by_source.values())

    @property
    def source_count(self) -> int:
        return sum(1 for skills in self.by_source.values() if skills)


def group_by_source(entries: list[SkillEntry]) -> dict[str, list[SkillEntry]]:
    groups: dict[str, list[SkillEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.source, []).append(entry)
    return {source: groups[source] for source in sorted(groups)}


def build_stats(scan: ScanResult) -> SkillStats:
    return SkillStats(by_source=group_by_source(scan.entries))
