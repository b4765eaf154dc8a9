# test_schema_resume.py
import dataclasses

from site_profile.consts import PERSONAL_INFO, SITE_METADATA
from site_profile.schema_resume import profile_to_resume, resume_schema
from site_profile.utils import _sha, profile_fingerprint


# --- Resume Mapping Tests ---
def test_resume_has_schema_keys():
    resume, schema = profile_to_resume(), resume_schema()
    assert set(resume) == set(schema)
    assert set(resume["contact"]) == set(schema["contact"])
    assert set(resume["skills"]) == set(schema["skills"])


def test_resume_contact_and_headline():
    resume = profile_to_resume()
    assert resume["name"] == "Ayoob Al-Delaimy"
    assert resume["headline"] == PERSONAL_INFO.title
    assert resume["summary"] == SITE_METADATA.description
    assert resume["contact"] == {
        "email": "awaldelaimy@gmail.com",
        "phone": "+1 858 988 0340",
        "website": "https://ayoobaldelaimy.com",
        "location": "San Diego, CA",
    }


def test_resume_education_and_skills():
    resume = profile_to_resume()
    assert resume["education"] == [
        {"degree": "B.S. Computer Engineering",
         "school": "University of California, San Diego", "end": "June 2026"},
        {"degree": "A.S.-T. in Computer Science",
         "school": "San Diego Mesa College", "end": "May 2024"},
    ]
    assert resume["skills"]["core"][0] == "Python"
    assert resume["skills"]["languages"] == ["English (Native)", "Arabic (Native)"]
    assert resume["skills"]["tools"][-1] == "MySQL"
    assert resume["experience"] == [] and resume["projects"] == []


def test_resume_does_not_share_schema_lists():
    resume = profile_to_resume()
    resume["experience"].append({"title": "x"})
    assert resume_schema()["experience"] == []
    assert profile_to_resume()["experience"] == []


def test_schema_changes_do_not_leak():
    schema = resume_schema()
    schema["contact"]["github"] = "octocat"
    schema["skills"]["core"].append("Rust")
    assert "github" not in resume_schema()["contact"]
    assert "github" not in profile_to_resume()["contact"]
    assert resume_schema()["skills"]["core"] == []


# --- Fingerprint Tests ---
def test_sha_helper():
    assert _sha("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_fingerprint_is_stable():
    assert profile_fingerprint() == profile_fingerprint(PERSONAL_INFO, SITE_METADATA)
    assert len(profile_fingerprint()) == 64


def test_fingerprint_tracks_content():
    moved = dataclasses.replace(PERSONAL_INFO, location="Los Angeles, CA")
    assert profile_fingerprint(moved, SITE_METADATA) != profile_fingerprint()
