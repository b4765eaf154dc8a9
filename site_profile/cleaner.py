"""
Authoring-time content checks and contact-field helpers.
"""
from __future__ import annotations
import re
from dataclasses import fields
from typing import List, Optional

from .models import Education, PersonalInfo, SiteMetadata, Skills

_DIGITS = re.compile(r"[^\d]")
_EMAIL  = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ProfileDataError(ValueError):
    """Raised by check_profile(); `problems` holds every finding."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("invalid profile data: " + "; ".join(self.problems))


# ───────────────────────────────────────── helpers ──
def phone_digits(raw: str) -> str:
    return _DIGITS.sub("", raw or "")

def normalise_phone(raw: str) -> str:
    digits = phone_digits(raw)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    if len(digits) == 10:
        return "+1 " + " ".join([digits[:3], digits[3:6], digits[6:]])
    return raw

def expand_url(token: str) -> str:
    token = (token or "").strip()
    if not token or token.startswith(("http://", "https://")):
        return token
    return f"https://{token.lstrip('/')}"


# ───────────────────────────────────────── checks ──
def _text_problems(record, prefix: str, skip=()) -> List[str]:
    out = []
    for f in fields(record):
        value = getattr(record, f.name)
        if f.name in skip:
            continue
        if value is None:
            out.append(f"{prefix}{f.name} is missing")
        elif not isinstance(value, str):
            out.append(f"{prefix}{f.name} is not text: {value!r}")
        elif not value.strip():
            out.append(f"{prefix}{f.name} is empty")
    return out

def _skill_problems(skills: Skills) -> List[str]:
    out = []
    for f in fields(skills):
        seen = set()
        for item in getattr(skills, f.name):
            if not isinstance(item, str):
                out.append(f"skills.{f.name} has a non-text entry {item!r}")
            elif not item.strip():
                out.append(f"skills.{f.name} has an empty entry")
            elif item in seen:
                out.append(f"skills.{f.name} repeats {item!r}")
            else:
                seen.add(item)
    return out

def check_profile(info: PersonalInfo, metadata: Optional[SiteMetadata] = None) -> None:
    problems: List[str] = []

    if metadata is not None:
        problems += _text_problems(metadata, "site.")
    problems += _text_problems(info, "", skip=("education", "skills"))

    if isinstance(info.education, Education):
        problems += _text_problems(info.education, "education.")
    else:
        problems.append("education is missing")

    # skills – text only, no blanks, no repeats
    if isinstance(info.skills, Skills):
        problems += _skill_problems(info.skills)
    else:
        problems.append("skills is missing")

    if isinstance(info.email, str) and info.email.strip() and not _EMAIL.match(info.email):
        problems.append(f"email {info.email!r} is not an address")

    if problems:
        raise ProfileDataError(problems)
