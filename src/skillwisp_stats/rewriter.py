"""Rewrite skill/source counts embedded in README.md and docs/skills.md."""
import enum
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

TOTAL = "total"
SOURCES = "sources"

# (pattern, replacement template, which count it carries)
COUNT_PATTERNS = [
    (re.compile(r"共\s*(\d+)\s*个\s*Skills"), "共 {n} 个 Skills", TOTAL),
    (re.compile(r"来自\s*(\d+)\s*个源"), "来自 {n} 个源", SOURCES),
    (re.compile(r"\*\*(\d+)\s*个\s*Skills\*\*"), "**{n} 个 Skills**", TOTAL),
    (re.compile(r"查看全部\s*(\d+)\s*个\s*Skills"), "查看全部 {n} 个 Skills", TOTAL),
]


class RewriteOutcome(enum.Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    MISSING = "missing"


def rewrite_counts(text: str, total_count: int, source_count: int) -> tuple[str, bool]:
    """Replace stale counts in ``text``.

    A match is only rewritten when its number differs from the current
    count, so correct phrases keep their original spacing.

    Returns:
        (new_text, modified)
    """
    counts = {TOTAL: total_count, SOURCES: source_count}
    modified = False

    for pattern, template, kind in COUNT_PATTERNS:
        expected = counts[kind]

        def _replace(m: re.Match) -> str:
            nonlocal modified
            if int(m.group(1)) == expected:
                return m.group(0)
            modified = True
            return template.format(n=expected)

        text = pattern.sub(_replace, text)

    return text, modified


def update_stats_in_file(path: Path, total_count: int, source_count: int) -> RewriteOutcome:
    """Rewrite counts in a document in place. Untouched if nothing changed."""
    if not path.is_file():
        logger.warning("Document not found: %s", path)
        return RewriteOutcome.MISSING

    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()

    new_content, modified = rewrite_counts(content, total_count, source_count)
    if not modified:
        return RewriteOutcome.UNCHANGED

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(new_content)
    logger.info("Updated counts in %s", path)
    return RewriteOutcome.UPDATED
