"""Skills directory scanner — walks skills/@source/id/SKILL.md, two levels only."""
import logging
from dataclasses import dataclass, field
from pathlib import Path

from skillwisp_stats.frontmatter import extract_metadata

logger = logging.getLogger(__name__)

SOURCE_MARKER = "@"
SKILL_FILE = "SKILL.md"


@dataclass(frozen=True)
class SkillEntry:
    """A skill directory with its marker file and parsed metadata."""
    source: str
    id: str
    file_path: Path
    name: str
    description: str
    marker: str = SOURCE_MARKER

    @property
    def path(self) -> str:
        return skill_path(self.source, self.id, self.marker)


@dataclass(frozen=True)
class BrokenSkillDir:
    """A source/id directory that has no marker file."""
    source: str
    id: str
    dir_path: Path
    marker: str = SOURCE_MARKER

    @property
    def path(self) -> str:
        return skill_path(self.source, self.id, self.marker)


@dataclass(frozen=True)
class ScanResult:
    entries: list[SkillEntry] = field(default_factory=list)
    broken: list[BrokenSkillDir] = field(default_factory=list)
    marker: str = SOURCE_MARKER


def skill_path(source: str, skill_id: str, marker: str = SOURCE_MARKER) -> str:
    """Registry path for a skill, e.g. ``@anthropic/pdf``."""
    return f"{marker}{source}/{skill_id}"


def _sorted_dirs(directory: Path) -> list[Path]:
    return sorted((p for p in directory.iterdir() if p.is_dir()), key=lambda p: p.name)


def scan_skills(
    root: Path,
    marker: str = SOURCE_MARKER,
    skill_file: str = SKILL_FILE,
) -> ScanResult:
    """Scan ``root/<marker><source>/<id>/`` for skill marker files.

    Only the two fixed levels are visited. Anything nested deeper is never
    looked at, so example or documentation trees inside a skill cannot be
    counted as skills. A missing root gives an empty result.
    """
    if not root.is_dir():
        logger.debug("Skills root %s does not exist", root)
        return ScanResult(marker=marker)

    entries: list[SkillEntry] = []
    broken: list[BrokenSkillDir] = []

    for source_dir in _sorted_dirs(root):
        name = source_dir.name
        if not name.startswith(marker) or len(name) == len(marker):
            logger.debug("Skipping non-source directory %s", source_dir)
            continue
        source = name[len(marker):]

        for skill_dir in _sorted_dirs(source_dir):
            marker_file = skill_dir / skill_file
            if not marker_file.is_file():
                broken.append(BrokenSkillDir(source=source, id=skill_dir.name, dir_path=skill_dir, marker=marker))
                continue
            meta = extract_metadata(marker_file.read_text(encoding="utf-8"), fallback_name=skill_dir.name)
            entries.append(SkillEntry(
                source=source,
                id=skill_dir.name,
                file_path=marker_file,
                name=meta.name,
                description=meta.description,
                marker=marker,
            ))

    logger.debug("Scanned %s: %d skills, %d broken directories", root, len(entries), len(broken))
    return ScanResult(entries=entries, broken=broken, marker=marker)
