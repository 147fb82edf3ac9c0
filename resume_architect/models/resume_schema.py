"""JSON schema that constrains structured resume generation."""

from typing import Any, Dict

STRING: Dict[str, Any] = {"type": "string"}
STRING_LIST: Dict[str, Any] = {"type": "array", "items": {"type": "string"}}

RESUME_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "personalInfo": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "The user's full name. Default to 'Alex Doe' if not specified.",
                },
                "email": {
                    "type": "string",
                    "description": "The user's email address. Default to 'alex.doe@email.com'.",
                },
                "phone": {
                    "type": "string",
                    "description": "The user's phone number. Default to '123-456-7890'.",
                },
                "linkedin": {
                    "type": "string",
                    "description": "URL to the user's LinkedIn profile. Omit if not provided.",
                },
                "portfolio": {
                    "type": "string",
                    "description": "URL to the user's portfolio website. Omit if not provided.",
                },
            },
            "required": ["name", "email", "phone"],
        },
        "summary": {
            "type": "string",
            "description": "A compelling 3-4 sentence professional summary tailored to the job target.",
        },
        "experience": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "jobTitle": STRING,
                    "company": STRING,
                    "location": STRING,
                    "startDate": {"type": "string", "description": "e.g., 'Jan 2020'"},
                    "endDate": {"type": "string", "description": "e.g., 'Present' or 'Dec 2022'"},
                    "description": {
                        **STRING_LIST,
                        "description": (
                            "Bulleted list of 3-5 key achievements and responsibilities, "
                            "starting with action verbs."
                        ),
                    },
                },
                "required": ["jobTitle", "company", "location", "startDate", "endDate", "description"],
            },
        },
        "education": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "institution": STRING,
                    "degree": STRING,
                    "location": STRING,
                    "graduationDate": STRING,
                },
                "required": ["institution", "degree", "location", "graduationDate"],
            },
        },
        "skills": {
            "type": "object",
            "properties": {
                "technical": {
                    **STRING_LIST,
                    "description": "List of technical skills (e.g., programming languages, software).",
                },
                "soft": {
                    **STRING_LIST,
                    "description": "List of soft skills (e.g., communication, leadership).",
                },
            },
            "required": ["technical", "soft"],
        },
    },
    "required": ["personalInfo", "summary", "experience", "education", "skills"],
}
