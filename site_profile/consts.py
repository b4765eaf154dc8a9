# Place any global data in this file.
# Import it from anywhere in the site: `from site_profile.consts import SITE_TITLE`.

import logging

from . import config
from .cleaner import check_profile
from .models import Education, PersonalInfo, SiteMetadata, Skills

log = logging.getLogger(__name__)

SITE_TITLE = "Ayoob Al-Delaimy"
SITE_DESCRIPTION = "Computer Engineering Student & Software Engineer - Building innovative solutions with cutting-edge technology"

SITE_METADATA = SiteMetadata(title=SITE_TITLE, description=SITE_DESCRIPTION)

# Personal information
PERSONAL_INFO = PersonalInfo(
    name="Ayoob Al-Delaimy",
    title="Computer Engineering Student & Software Engineer",
    email="awaldelaimy@gmail.com",
    phone="(858) 988-0340",
    website="ayoobaldelaimy.com",
    location="San Diego, CA",
    education=Education(
        university="University of California, San Diego",
        degree="B.S. Computer Engineering",
        graduation="June 2026",
        community_college="San Diego Mesa College",
        associate_degree="A.S.-T. in Computer Science",
        associate_graduation="May 2024",
    ),
    skills=Skills(
        programming_languages=("Python", "C++", "C", "JavaScript/TypeScript", "Java", "SQL", "HTML/CSS", "Arduino", "Assembly"),
        frameworks=("React/React Native", "Node.js", "Express", "Git", "MongoDB", "Docker", "FastAPI", "MySQL"),
        soft_skills=("Problem Solving", "Team Collaboration", "Leadership"),
        spoken_languages=("English (Native)", "Arabic (Native)"),
    ),
)

if config.VERIFY_ON_IMPORT:
    check_profile(PERSONAL_INFO, SITE_METADATA)
    log.debug("profile data for %s passed content checks", PERSONAL_INFO.name)


def get_site_title() -> str:
    return SITE_TITLE

def get_site_description() -> str:
    return SITE_DESCRIPTION

def get_site_metadata() -> SiteMetadata:
    return SITE_METADATA

def get_personal_info() -> PersonalInfo:
    """The owner's profile. Frozen all the way down; use .to_dict() for a mutable copy."""
    return PERSONAL_INFO
