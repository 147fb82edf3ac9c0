"""Service for generating and storing resume and cover letter documents."""

import logging
from typing import List, Optional
from resume_architect.models.request_models import GenerationRequest
from resume_architect.models.resume_models import GeneratedDocument
from resume_architect.services.document_assembler import DocumentAssembler
from resume_architect.services.document_store import DocumentStore
from resume_architect.services.generation_client import GenerationClient

logger = logging.getLogger(__name__)


class DocumentGenerator:
    """Run a full generation cycle: prompts, generation, assembly, storage."""

    def __init__(
        self,
        client: Optional[GenerationClient] = None,
        assembler: Optional[DocumentAssembler] = None,
        store: Optional[DocumentStore] = None
    ):
        """Initialize the document generator."""
        self.client = client or GenerationClient()
        self.assembler = assembler or DocumentAssembler()
        self.store = store or DocumentStore()

    async def generate(self, job_target: str, experience: str, skills: str) -> GeneratedDocument:
        """
        Generate a resume and cover letter and append them to the history.

        Nothing is stored unless both artifacts were generated and assembled.

        Args:
            job_target: Target role
            experience: Free-text job history
            skills: Free-text skills

        Returns:
            GeneratedDocument: The stored document

        Raises:
            pydantic.ValidationError: If any input is blank
            GenerationError: If either generation request fails
            MalformedResumeError: If the structured resume is invalid
        """
        request = GenerationRequest(job_target=job_target, experience=experience, skills=skills)

        raw = await self.client.generate(request.job_target, request.experience, request.skills)
        document = self.assembler.assemble(request.job_target, raw.resume_json, raw.cover_letter)
        await self.store.append(document)

        logger.info("Generated document %s", document.document_id)
        return document

    def history(self) -> List[GeneratedDocument]:
        """Return the stored documents, newest first."""
        return list(self.store.history)

    def select(self, document_id: str) -> Optional[GeneratedDocument]:
        """Return a stored document by id, or None."""
        return self.store.select(document_id)
