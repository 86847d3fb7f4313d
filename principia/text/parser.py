"""Parse the markdown text structure into catalog records.

Layout understood by the parser::

    # Catalog title
    preamble text
    ## Why section heading
    rationale text
    ### 1. Principle Name (ABBR)
    definition text
    **Bad Example:** title, fenced code, **Issues:**, numbered list
    **Good Example:** title, fenced code, **Benefits:**, numbered list

Headings are only recognised outside fenced code blocks, so comment
lines such as ``# bad: knows too much`` inside a snippet stay code.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..catalog.models import BadExample, Catalog, GoodExample, PrincipleEntry
from ..catalog.validation import validate_catalog
from ..errors import MalformedEntryError
from .serializer import BAD_LABEL, BENEFITS_LABEL, GOOD_LABEL, ISSUES_LABEL

_HEADING_RE = re.compile(r"^(#{1,3})\s+(.*\S)\s*$")
_ENTRY_HEADING_RE = re.compile(
    r"^(?P<ordinal>\d+)[.)]\s+(?P<name>.+?)(?:\s+\((?P<abbr>[^()]+)\))?$"
)
_ITEM_RE = re.compile(r"^\s{0,3}(\d+)[.)]\s+(.*\S)\s*$")


@dataclass
class _Section:
    level: int
    heading: str
    line_no: int
    body: list[str] = field(default_factory=list)


def _is_fence(line: str) -> bool:
    return line.lstrip().startswith("```")


def _text(lines: list[str]) -> str:
    return "\n".join(lines).strip()


def _split_sections(text: str) -> list[_Section]:
    """Split text on level 1-3 headings that sit outside code fences."""
    sections = [_Section(0, "", 0)]
    in_fence = False
    for line_no, line in enumerate(text.splitlines(), 1):
        if _is_fence(line):
            in_fence = not in_fence
        elif not in_fence:
            match = _HEADING_RE.match(line)
            if match:
                sections.append(_Section(len(match.group(1)), match.group(2), line_no))
                continue
        sections[-1].body.append(line)

    if in_fence:
        last = sections[-1]
        raise MalformedEntryError(last.heading or "catalog", "code", "unterminated code block")
    return sections


def _find_label(lines: list[str], label: str) -> list[int]:
    """Indices of lines (outside fences) that start with a bold label."""
    found = []
    in_fence = False
    for i, line in enumerate(lines):
        if _is_fence(line):
            in_fence = not in_fence
        elif not in_fence and line.strip().startswith(label):
            found.append(i)
    return found


def _skip_blank(lines: list[str], i: int) -> int:
    while i < len(lines) and not lines[i].strip():
        i += 1
    return i


def _parse_numbered(entry: str, field_name: str, lines: list[str]) -> tuple[str, ...]:
    items = []
    for line in lines:
        if not line.strip():
            continue
        match = _ITEM_RE.match(line)
        if match:
            number = int(match.group(1))
            if number != len(items) + 1:
                raise MalformedEntryError(
                    entry, field_name, f"item numbered {number}, expected {len(items) + 1}"
                )
            items.append(match.group(2))
        elif items and line[:1].isspace():
            # Indented continuation of the previous item
            items[-1] = f"{items[-1]} {line.strip()}"
        else:
            raise MalformedEntryError(entry, field_name, f"unexpected text {line.strip()!r}")

    if not items:
        raise MalformedEntryError(entry, field_name, "list must have at least one item")
    return tuple(items)


def _parse_example(entry: str, field_name: str, lines: list[str], label: str, list_label: str):
    """Return (title, language, code, items) for one labelled example block."""
    title = lines[0].strip()[len(label):].strip()
    list_field = f"{field_name}.{list_label.strip('*:').lower()}"

    i = _skip_blank(lines, 1)
    if i >= len(lines) or not _is_fence(lines[i]):
        raise MalformedEntryError(entry, f"{field_name}.code", "expected a fenced code block after the title")
    language = lines[i].strip()[3:].strip()

    i += 1
    start = i
    while i < len(lines) and not _is_fence(lines[i]):
        i += 1
    if i >= len(lines):
        raise MalformedEntryError(entry, f"{field_name}.code", "unterminated code block")
    code = "\n".join(lines[start:i])

    i = _skip_blank(lines, i + 1)
    if i >= len(lines) or lines[i].strip() != list_label:
        raise MalformedEntryError(entry, list_field, f"expected {list_label} after the code block")

    items = _parse_numbered(entry, list_field, lines[i + 1:])
    return title, language, code, items


def _parse_entry(section: _Section) -> PrincipleEntry:
    match = _ENTRY_HEADING_RE.match(section.heading)
    if not match:
        raise MalformedEntryError(
            section.heading, "heading", "expected '<n>. <Name>' with an optional '(ABBR)'"
        )
    ordinal = int(match.group("ordinal"))
    name = match.group("name").strip()
    abbreviation = match.group("abbr").strip() if match.group("abbr") else None
    entry = f"#{ordinal} {abbreviation or name}"

    body = section.body
    bad_at = _find_label(body, BAD_LABEL)
    good_at = _find_label(body, GOOD_LABEL)
    for found, field_name, label in ((bad_at, "bad_example", BAD_LABEL), (good_at, "good_example", GOOD_LABEL)):
        if not found:
            raise MalformedEntryError(entry, field_name, f"missing {label} block")
        if len(found) > 1:
            raise MalformedEntryError(entry, field_name, "entry must have exactly one")
    bad_at, good_at = bad_at[0], good_at[0]
    if good_at < bad_at:
        raise MalformedEntryError(entry, "good_example", "must come after the bad example")

    title, language, code, issues = _parse_example(
        entry, "bad_example", body[bad_at:good_at], BAD_LABEL, ISSUES_LABEL
    )
    bad = BadExample(title=title, code=code, issues=issues, language=language)

    title, language, code, benefits = _parse_example(
        entry, "good_example", body[good_at:], GOOD_LABEL, BENEFITS_LABEL
    )
    good = GoodExample(title=title, code=code, benefits=benefits, language=language)

    return PrincipleEntry(
        ordinal=ordinal,
        name=name,
        abbreviation=abbreviation,
        definition=_text(body[:bad_at]),
        bad_example=bad,
        good_example=good,
    )


def parse_catalog(text: str) -> Catalog:
    """
    Parse catalog text and validate it.

    Raises:
        MalformedEntryError: naming the entry and field at fault
    """
    sections = _split_sections(text)
    if _text(sections[0].body):
        raise MalformedEntryError("catalog", "title", "text found before the '# ' title heading")

    sections = sections[1:]
    if not sections or sections[0].level != 1:
        raise MalformedEntryError("catalog", "title", "expected a '# ' title heading first")
    title_section, rest = sections[0], sections[1:]

    rationale_heading = rationale = ""
    if rest and rest[0].level == 2:
        rationale_heading, rationale = rest[0].heading, _text(rest[0].body)
        rest = rest[1:]

    entries = []
    for section in rest:
        if section.level != 3:
            raise MalformedEntryError(
                "catalog",
                "headings",
                f"line {section.line_no}: unexpected level-{section.level} heading {section.heading!r}",
            )
        entries.append(_parse_entry(section))

    catalog = Catalog(
        title=title_section.heading,
        preamble=_text(title_section.body),
        rationale_heading=rationale_heading,
        rationale=rationale,
        entries=entries,
    )
    validate_catalog(catalog)
    return catalog
