"""SKILL.md frontmatter extraction — name and description only."""
import re
from dataclasses import dataclass

FRONTMATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---", re.DOTALL)
NAME_RE = re.compile(r"^name:[ \t]*(.*?)[ \t]*\r?$", re.MULTILINE)
DESCRIPTION_RE = re.compile(r"^description:[ \t]*(.*?)[ \t]*\r?$", re.MULTILINE)


@dataclass(frozen=True)
class SkillMetadata:
    name: str
    description: str


def unquote(value: str) -> str:
    """Strip whitespace and one matching pair of surrounding quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] in "\"'" and value[-1] == value[0]:
        return value[1:-1]
    return value


def extract_frontmatter(text: str) -> str | None:
    """Return the body of the leading ``---`` block, or None if there isn't one."""
    m = FRONTMATTER_RE.match(text)
    return m.group(1) if m else None


def extract_metadata(text: str, fallback_name: str) -> SkillMetadata:
    """Pull ``name`` and ``description`` out of SKILL.md text.

    Missing frontmatter or a missing/empty field falls back to
    ``fallback_name`` for the name and an empty string for the description.
    Values are taken verbatim after unquoting.
    """
    block = extract_frontmatter(text)
    if block is None:
        return SkillMetadata(name=fallback_name, description="")

    name_match = NAME_RE.search(block)
    desc_match = DESCRIPTION_RE.search(block)
    name = unquote(name_match.group(1)) if name_match else ""
    description = unquote(desc_match.group(1)) if desc_match else ""
    return SkillMetadata(name=name or fallback_name, description=description)
