from __future__ import annotations
import json
from typing import Any, Dict, Optional

from .cleaner import expand_url, normalise_phone
from .models import PersonalInfo, SiteMetadata

# canonical schema (empty lists – no placeholders)
_RESUME_SCHEMA = {
    "name": "",
    "headline": "",
    "contact": {"email": "", "phone": "", "website": "", "location": ""},
    "summary": "",
    "experience": [],
    "education": [],
    "skills": {"core": [], "languages": [], "tools": [], "soft": []},
    "projects": [],
}


def resume_schema() -> Dict[str, Any]:
    """Deep copy of the canonical schema; callers may fill it in place."""
    return json.loads(json.dumps(_RESUME_SCHEMA))


def profile_to_resume(info: Optional[PersonalInfo] = None,
                      metadata: Optional[SiteMetadata] = None) -> Dict[str, Any]:
    """Profile → fresh résumé dict in resume_schema() shape."""
    if info is None or metadata is None:
        from .consts import PERSONAL_INFO, SITE_METADATA
        info = info or PERSONAL_INFO
        metadata = metadata or SITE_METADATA

    out = resume_schema()
    out["name"] = info.name
    out["headline"] = info.title
    out["summary"] = metadata.description
    out["contact"].update(
        email=info.email,
        phone=normalise_phone(info.phone),
        website=expand_url(info.website),
        location=info.location,
    )

    edu = info.education
    out["education"] = [
        {"degree": edu.degree, "school": edu.university, "end": edu.graduation},
        {"degree": edu.associate_degree, "school": edu.community_college,
         "end": edu.associate_graduation},
    ]

    sk = info.skills
    out["skills"] = {
        "core": list(sk.programming_languages),
        "languages": list(sk.spoken_languages),
        "tools": list(sk.frameworks),
        "soft": list(sk.soft_skills),
    }
    return out
