"""Shared fixtures for Resume Architect tests."""

import json
from datetime import datetime, timezone
import pytest
from resume_architect.services.document_assembler import DocumentAssembler


@pytest.fixture
def resume_payload():
    """Structured resume as the generator would return it."""
    return {
        "personalInfo": {
            "name": "Alex Doe",
            "email": "alex.doe@email.com",
            "phone": "123-456-7890",
            "linkedin": "https://linkedin.com/in/alexdoe",
        },
        "summary": "Frontend developer with three years of React experience.",
        "experience": [
            {
                "jobTitle": "Frontend Developer",
                "company": "Acme",
                "location": "Remote",
                "startDate": "Jan 2021",
                "endDate": "Present",
                "description": [
                    "Built React applications used by 10k customers",
                    "Migrated the codebase to TypeScript",
                    "Mentored two junior developers",
                ],
            }
        ],
        "education": [
            {
                "institution": "State University",
                "degree": "B.Sc. Computer Science",
                "location": "Springfield",
                "graduationDate": "May 2020",
            }
        ],
        "skills": {
            "technical": ["React", "TypeScript"],
            "soft": ["communication"],
        },
    }


@pytest.fixture
def resume_json(resume_payload):
    return json.dumps(resume_payload)


@pytest.fixture
def cover_letter_text():
    return (
        "Dear Hiring Manager,\n"
        "I am excited to apply for the Senior Frontend Developer role.\n"
        "\n"
        "At Acme I built React applications end to end.\n"
        "Sincerely,\nAlex Doe"
    )


@pytest.fixture
def assembler():
    """Assembler with predictable ids and timestamps."""
    counter = iter(range(1, 1000))
    return DocumentAssembler(
        id_generator=lambda: f"doc-{next(counter)}",
        clock=lambda: datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
    )
