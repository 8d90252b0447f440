"""Line-oriented readers for the CLI registry manifests.

Both files are YAML on disk, but only a handful of keys matter here, so they
are scanned line by line rather than loaded as documents:

- ``index.yaml``: a list of records, each with ``id``, ``source`` and ``path``.
- ``i18n/<locale>.yaml``: ``source -> skill id -> {...}`` mapping, used for
  presence checks only.
"""
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from skillwisp_stats.scanner import SOURCE_MARKER

logger = logging.getLogger(__name__)

INDEX_FILE = "index.yaml"
I18N_DIR = "i18n"

INDEX_FIELD_RE = re.compile(r"^(\s*)(-\s+)?(id|source|path):[ \t]*(.*?)\s*$")
QUOTED_VALUE_RE = re.compile(r"""^(?:"([^"]*)"|'([^']*)')""")
COMMENT_RE = re.compile(r"(?:^|\s+)#.*$")
TRANSLATION_SOURCE_RE = re.compile(r"^  ([a-z][a-z0-9-]*):\s*$")
TRANSLATION_SKILL_RE = re.compile(r"^    ([a-z][a-z0-9.-]*):\s*$")


@dataclass(frozen=True)
class IndexEntry:
    id: str
    source: str
    path: str


@dataclass(frozen=True)
class RegistrySnapshot:
    """Parsed contents of the registry directory."""
    index: list[IndexEntry] = field(default_factory=list)
    translations: dict[str, set[str]] = field(default_factory=dict)
    index_found: bool = False
    translations_found: bool = False


def scalar_value(raw: str) -> str:
    """Value of a one-line YAML scalar: quoted text, or plain text minus a ``# comment``."""
    raw = raw.strip()
    m = QUOTED_VALUE_RE.match(raw)
    if m:
        return m.group(1) if m.group(1) is not None else m.group(2)
    return COMMENT_RE.sub("", raw).strip()


def _complete(record: dict) -> IndexEntry | None:
    if all(record.get(k) for k in ("id", "source", "path")):
        return IndexEntry(id=record["id"], source=record["source"], path=record["path"])
    return None


def parse_index(text: str, marker: str = SOURCE_MARKER) -> list[IndexEntry]:
    """Parse index records. Incomplete records are dropped.

    A record starts at a ``- id:`` list item. ``source:`` and ``path:`` only
    count at that item's key column, so keys of nested mappings are ignored.
    """
    entries: list[IndexEntry] = []
    record: dict | None = None
    column = 0

    for line in text.splitlines():
        m = INDEX_FIELD_RE.match(line)
        if not m:
            continue
        indent, dash, key = m.group(1), m.group(2), m.group(3)
        key_column = len(indent) + len(dash or "")
        value = scalar_value(m.group(4))
        if key == "id":
            if not dash:
                continue
            if record is not None and (entry := _complete(record)):
                entries.append(entry)
            record = {"id": value}
            column = key_column
        elif record is not None and not dash and key_column == column:
            if key == "source":
                value = value.removeprefix(marker)
            record[key] = value

    if record is not None and (entry := _complete(record)):
        entries.append(entry)
    return entries


def parse_translations(text: str) -> dict[str, set[str]]:
    """Parse a translation catalog into ``{source: {skill ids}}``."""
    translations: dict[str, set[str]] = {}
    current_source: str | None = None

    for line in text.splitlines():
        m = TRANSLATION_SOURCE_RE.match(line)
        if m:
            current_source = m.group(1)
            translations.setdefault(current_source, set())
            continue
        m = TRANSLATION_SKILL_RE.match(line)
        if m and current_source is not None:
            translations[current_source].add(m.group(1))

    return translations


def read_manifest(path: Path) -> str | None:
    """Read a manifest file, or return None (with a warning) if it is absent."""
    if not path.is_file():
        logger.warning("Manifest not found: %s", path)
        return None
    return path.read_text(encoding="utf-8")


def load_registry(registry_dir: Path, locale: str, marker: str = SOURCE_MARKER) -> RegistrySnapshot:
    """Load ``index.yaml`` and ``i18n/<locale>.yaml`` from a registry directory."""
    index_text = read_manifest(registry_dir / INDEX_FILE)
    i18n_text = read_manifest(registry_dir / I18N_DIR / f"{locale}.yaml")

    index = parse_index(index_text, marker) if index_text is not None else []
    translations = parse_translations(i18n_text) if i18n_text is not None else {}
    logger.debug(
        "Loaded registry %s: %d index entries, %d translated sources",
        registry_dir, len(index), len(translations),
    )
    return RegistrySnapshot(
        index=index,
        translations=translations,
        index_found=index_text is not None,
        translations_found=i18n_text is not None,
    )
