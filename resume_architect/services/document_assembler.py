"""Assemble raw generation output into a generated document."""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional
from pydantic import ValidationError
from resume_architect.errors import MalformedResumeError
from resume_architect.models.resume_models import (
    CoverLetterRecord,
    GeneratedDocument,
    GeneratedResume,
    ResumeRecord,
)
from resume_architect.utils.text_helpers import strip_code_fence

logger = logging.getLogger(__name__)


def new_document_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


class DocumentAssembler:
    """Turn the structured resume text and cover letter text into one document."""

    def __init__(
        self,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the assembler.

        Args:
            id_generator: Source of resume ids (UUID4 strings if None)
            clock: Source of creation timestamps (UTC now if None)
        """
        self.id_generator = id_generator or new_document_id
        self.clock = clock or utc_now

    def parse_resume(self, resume_json: str) -> GeneratedResume:
        """
        Parse and validate the structured resume response.

        Args:
            resume_json: Text returned by structured generation

        Returns:
            GeneratedResume: Validated resume payload

        Raises:
            MalformedResumeError: If the text is not a JSON object matching the resume schema
        """
        try:
            data = json.loads(strip_code_fence(resume_json))
        except ValueError as e:
            raise MalformedResumeError(f"Resume response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedResumeError(
                f"Resume response must be a JSON object, got {type(data).__name__}"
            )

        try:
            return GeneratedResume.model_validate(data)
        except ValidationError as e:
            raise MalformedResumeError(
                f"Resume response does not match the resume schema: {e}"
            ) from e

    def assemble(self, job_target: str, resume_json: str, cover_letter: str) -> GeneratedDocument:
        """
        Build the immutable document for one generation cycle.

        The resume gets a fresh id and the caller's job target, whatever the
        generator emitted for either.

        Args:
            job_target: Job target exactly as the user entered it
            resume_json: Structured resume response
            cover_letter: Cover letter response

        Returns:
            GeneratedDocument: Assembled document

        Raises:
            MalformedResumeError: If the resume response is invalid
            ValueError: If the id generator returns an empty id
        """
        generated = self.parse_resume(resume_json)

        document_id = self.id_generator()
        if not isinstance(document_id, str) or not document_id:
            raise ValueError(f"id_generator must return a non-empty string, got {document_id!r}")

        resume = ResumeRecord(
            id=document_id,
            job_target=job_target,
            personal_info=generated.personal_info,
            summary=generated.summary,
            experience=generated.experience,
            education=generated.education,
            skills=generated.skills,
        )
        document = GeneratedDocument(
            resume=resume,
            cover_letter=CoverLetterRecord(content=cover_letter),
            created_at=self.clock(),
        )
        logger.info("Assembled document %s for %r", resume.id, job_target)
        return document
