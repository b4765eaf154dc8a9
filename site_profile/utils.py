"""
Utility functions for the site_profile package.
"""

from __future__ import annotations
import hashlib
import json
from typing import Optional

from .models import PersonalInfo, SiteMetadata


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def profile_fingerprint(info: Optional[PersonalInfo] = None,
                        metadata: Optional[SiteMetadata] = None) -> str:
    """Stable cache key for consumers that cache rendered pages."""
    if info is None or metadata is None:
        from .consts import PERSONAL_INFO, SITE_METADATA
        info = info or PERSONAL_INFO
        metadata = metadata or SITE_METADATA
    payload = {"site": metadata.to_dict(), "personal": info.to_dict()}
    return _sha(json.dumps(payload, sort_keys=True, ensure_ascii=False))
