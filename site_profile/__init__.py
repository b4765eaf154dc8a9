"""
Site-wide constants for the portfolio site: title, description and the
owner's personal profile.
"""

import logging

from . import config
from .cleaner import ProfileDataError, check_profile
from .consts import (
    PERSONAL_INFO,
    SITE_DESCRIPTION,
    SITE_METADATA,
    SITE_TITLE,
    get_personal_info,
    get_site_description,
    get_site_metadata,
    get_site_title,
)
from .models import Education, PersonalInfo, SiteMetadata, Skills
from .schema_resume import profile_to_resume, resume_schema
from .utils import profile_fingerprint

logging.getLogger(__name__).setLevel(config.get_log_level())

__all__ = [
    "SITE_TITLE", "SITE_DESCRIPTION", "SITE_METADATA", "PERSONAL_INFO",
    "get_site_title", "get_site_description", "get_site_metadata", "get_personal_info",
    "SiteMetadata", "Education", "Skills", "PersonalInfo",
    "ProfileDataError", "check_profile",
    "resume_schema", "profile_to_resume", "profile_fingerprint",
]
