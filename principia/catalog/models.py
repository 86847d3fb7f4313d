"""Documentation records that make up the principle catalog."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class BadExample:
    """A snippet showing the principle being violated."""
    title: str
    code: str
    issues: tuple[str, ...] = ()
    language: str = "python"

    def __post_init__(self):
        if isinstance(self.issues, list):
            object.__setattr__(self, "issues", tuple(self.issues))

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "code": self.code,
            "issues": list(self.issues),
            "language": self.language,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BadExample":
        return cls(**data)


@dataclass(frozen=True)
class GoodExample:
    """A snippet showing the principle applied."""
    title: str
    code: str
    benefits: tuple[str, ...] = ()
    language: str = "python"

    def __post_init__(self):
        if isinstance(self.benefits, list):
            object.__setattr__(self, "benefits", tuple(self.benefits))

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "code": self.code,
            "benefits": list(self.benefits),
            "language": self.language,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GoodExample":
        return cls(**data)


@dataclass(frozen=True)
class PrincipleEntry:
    """One principle: definition plus its bad/good example pair."""
    ordinal: int
    name: str
    definition: str
    bad_example: BadExample
    good_example: GoodExample
    abbreviation: Optional[str] = None

    @property
    def label(self) -> str:
        """Short name used in messages, e.g. ``#1 SRP``."""
        return f"#{self.ordinal} {self.abbreviation or self.name}"

    @property
    def heading(self) -> str:
        if self.abbreviation:
            return f"{self.ordinal}. {self.name} ({self.abbreviation})"
        return f"{self.ordinal}. {self.name}"

    def to_dict(self) -> dict:
        return {
            "ordinal": self.ordinal,
            "name": self.name,
            "abbreviation": self.abbreviation,
            "definition": self.definition,
            "bad_example": self.bad_example.to_dict(),
            "good_example": self.good_example.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PrincipleEntry":
        return cls(
            ordinal=data["ordinal"],
            name=data["name"],
            abbreviation=data.get("abbreviation"),
            definition=data["definition"],
            bad_example=BadExample.from_dict(data["bad_example"]),
            good_example=GoodExample.from_dict(data["good_example"]),
        )


@dataclass(frozen=True)
class Catalog:
    """The ordered entries plus the introductory text that precedes them."""
    title: str
    preamble: str = ""
    rationale_heading: str = ""
    rationale: str = ""
    entries: tuple[PrincipleEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "preamble": self.preamble,
            "rationale_heading": self.rationale_heading,
            "rationale": self.rationale,
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        return cls(
            title=data["title"],
            preamble=data.get("preamble", ""),
            rationale_heading=data.get("rationale_heading", ""),
            rationale=data.get("rationale", ""),
            entries=[PrincipleEntry.from_dict(e) for e in data.get("entries", [])],
        )
