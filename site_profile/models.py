"""
Immutable value types for the site metadata and personal profile.

Every record is a frozen dataclass and every list is stored as a tuple,
so a record handed to a template layer cannot be changed in place.
`to_dict()` returns a fresh plain copy keyed the way the site templates
read it (camelCase).
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _plain(value: Any) -> Any:
    if isinstance(value, _Record):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value


class _Record:
    """Mixin shared by the frozen records below."""

    def to_dict(self) -> Dict[str, Any]:
        return {_camel(f.name): _plain(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class SiteMetadata(_Record):
    title: str
    description: str


@dataclass(frozen=True)
class Education(_Record):
    university: str
    degree: str
    graduation: str             # free-form label, e.g. "June 2026"
    community_college: str
    associate_degree: str
    associate_graduation: str


@dataclass(frozen=True)
class Skills(_Record):
    programming_languages: Tuple[str, ...]
    frameworks: Tuple[str, ...]
    soft_skills: Tuple[str, ...]
    spoken_languages: Tuple[str, ...]

    def __post_init__(self):
        # accept any iterable of strings at construction, store tuples
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str):
                raise TypeError(f"Skills.{f.name} takes a sequence of strings, got the string {value!r}")
            object.__setattr__(self, f.name, tuple(value))


@dataclass(frozen=True)
class PersonalInfo(_Record):
    name: str
    title: str
    email: str
    phone: str
    website: str
    location: str
    education: Education
    skills: Skills
