"""Pydantic models for generated resume and cover letter documents."""

from datetime import datetime
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field


class _FrozenModel(BaseModel):
    """Immutable model that accepts both field names and JSON aliases."""

    class Config:
        """Pydantic config."""

        frozen = True
        populate_by_name = True


class PersonalInfo(_FrozenModel):
    """Personal information model."""

    name: str
    email: str
    phone: str
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None


class ExperienceEntry(_FrozenModel):
    """Experience entry model."""

    job_title: str = Field(alias="jobTitle")
    company: str
    location: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    description: Tuple[str, ...]


class EducationEntry(_FrozenModel):
    """Education entry model."""

    institution: str
    degree: str
    location: str
    graduation_date: str = Field(alias="graduationDate")


class SkillSet(_FrozenModel):
    """Skills split into technical and soft categories."""

    technical: Tuple[str, ...]
    soft: Tuple[str, ...]


class GeneratedResume(_FrozenModel):
    """Resume payload as produced by structured generation."""

    personal_info: PersonalInfo = Field(alias="personalInfo")
    summary: str
    experience: Tuple[ExperienceEntry, ...]
    education: Tuple[EducationEntry, ...]
    skills: SkillSet


class ResumeRecord(GeneratedResume):
    """Complete resume model with identity and job target."""

    id: str = Field(min_length=1)
    job_target: str = Field(alias="jobTarget")


class CoverLetterRecord(_FrozenModel):
    """Cover letter model."""

    content: str

    @property
    def paragraphs(self) -> List[str]:
        """Non-blank paragraphs of the letter, in order."""
        return [line.strip() for line in self.content.split("\n") if line.strip()]


class GeneratedDocument(_FrozenModel):
    """A resume paired with its cover letter."""

    resume: ResumeRecord
    cover_letter: CoverLetterRecord = Field(alias="coverLetter")
    created_at: datetime = Field(alias="createdAt")

    @property
    def document_id(self) -> str:
        """Identity of the document (the resume id)."""
        return self.resume.id
