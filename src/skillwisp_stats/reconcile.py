"""Cross-check scanned skills against the CLI registry index and translations."""
from dataclasses import dataclass, field
from pathlib import Path

from skillwisp_stats.manifests import IndexEntry, RegistrySnapshot
from skillwisp_stats.scanner import SKILL_FILE, ScanResult, skill_path

# Issue kinds
MISSING_INDEX = "index"
MISSING_TRANSLATION = "translation"
ORPHANED_TRANSLATION = "orphaned"
MISSING_SKILL_DIR = "skillDir"
MISSING_SKILL_MD = "missingSkillMd"


@dataclass(frozen=True)
class RegistryIssue:
    """A single reconciliation finding."""
    kind: str
    source: str
    id: str
    path: str


@dataclass(frozen=True)
class ReconciliationResult:
    missing_index: list[RegistryIssue] = field(default_factory=list)
    missing_translation: list[RegistryIssue] = field(default_factory=list)
    orphaned_translation: list[RegistryIssue] = field(default_factory=list)
    missing_skill_dir: list[RegistryIssue] = field(default_factory=list)
    index_count: int = 0
    translation_count: int = 0
    index_found: bool = True
    translations_found: bool = True

    @property
    def is_clean(self) -> bool:
        return not (
            self.missing_index
            or self.missing_translation
            or self.orphaned_translation
            or self.missing_skill_dir
        )


def index_by_path(index: list[IndexEntry]) -> dict[str, IndexEntry]:
    """Map registry path to record. Later duplicates replace earlier ones."""
    return {entry.path: entry for entry in index}


def index_by_source(index: list[IndexEntry]) -> dict[str, list[IndexEntry]]:
    grouped: dict[str, list[IndexEntry]] = {}
    for entry in index:
        grouped.setdefault(entry.source, []).append(entry)
    return grouped


def reconcile(
    scan: ScanResult,
    registry: RegistrySnapshot,
    skills_root: Path,
    skill_file: str = SKILL_FILE,
) -> ReconciliationResult:
    """Run the four registry checks. All of them always run.

    1. Each scanned skill must have an index record at ``@source/id``; if it
       does, the record's own source/id must appear in the translations.
    2. Each index record's path must resolve to a skill file on disk.
    3. Each translated ``(source, id)`` must have an index record.
    4. Directories without a skill file are reported as ``missingSkillMd``.
    """
    by_path = index_by_path(registry.index)
    by_source = index_by_source(registry.index)
    translations = registry.translations

    missing_index: list[RegistryIssue] = []
    missing_translation: list[RegistryIssue] = []
    for entry in scan.entries:
        record = by_path.get(entry.path)
        if record is None:
            missing_index.append(RegistryIssue(MISSING_INDEX, entry.source, entry.id, entry.path))
        elif record.id not in translations.get(record.source, set()):
            missing_translation.append(
                RegistryIssue(MISSING_TRANSLATION, record.source, record.id, record.path)
            )

    missing_skill_dir: list[RegistryIssue] = []
    for record in registry.index:
        if not (skills_root / record.path / skill_file).is_file():
            missing_skill_dir.append(RegistryIssue(MISSING_SKILL_DIR, record.source, record.id, record.path))

    orphaned: list[RegistryIssue] = []
    for source in sorted(translations):
        indexed_ids = {e.id for e in by_source.get(source, [])}
        for skill_id in sorted(translations[source]):
            if skill_id not in indexed_ids:
                orphaned.append(
                    RegistryIssue(ORPHANED_TRANSLATION, source, skill_id, skill_path(source, skill_id, scan.marker))
                )

    for broken in scan.broken:
        missing_skill_dir.append(RegistryIssue(MISSING_SKILL_MD, broken.source, broken.id, broken.path))

    return ReconciliationResult(
        missing_index=missing_index,
        missing_translation=missing_translation,
        orphaned_translation=orphaned,
        missing_skill_dir=missing_skill_dir,
        index_count=len(registry.index),
        translation_count=sum(len(ids) for ids in translations.values()),
        index_found=registry.index_found,
        translations_found=registry.translations_found,
    )
