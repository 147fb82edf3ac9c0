"""Request models for document generation."""

from pydantic import BaseModel, Field, field_validator


class GenerationRequest(BaseModel):
    """User input for a resume and cover letter generation cycle."""

    job_target: str = Field(
        ...,
        description="Target role, carried through to the resume unchanged",
        examples=["Senior Frontend Developer"],
    )
    experience: str = Field(
        ...,
        description="Free-text job history: titles, companies and responsibilities",
        examples=["3 years at Acme building React apps"],
    )
    skills: str = Field(
        ...,
        description="Free-text skills, usually comma separated",
        examples=["React, TypeScript, communication"],
    )

    @field_validator("job_target", "experience", "skills")
    @classmethod
    def _require_text(cls, value: str) -> str:
        # Checked on the stripped value but returned verbatim
        if not value.strip():
            raise ValueError("Please fill in all fields.")
        return value
