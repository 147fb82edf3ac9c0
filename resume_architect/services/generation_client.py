"""Concurrent resume and cover letter generation."""

import asyncio
import json
import logging
from typing import NamedTuple, Optional
from resume_architect.errors import GenerationError
from resume_architect.models.resume_schema import RESUME_SCHEMA
from resume_architect.services.llm_service import LLMService
from resume_architect.services.prompt_builder import build_prompts
from resume_architect.utils.text_helpers import strip_code_fence

logger = logging.getLogger(__name__)


class RawGeneration(NamedTuple):
    """Raw outputs of one generation cycle."""

    resume_json: str
    cover_letter: str


def _discard_outcome(task: "asyncio.Task[str]") -> None:
    # Retrieve the exception of a request nobody awaits any more
    if not task.cancelled() and task.exception() is not None:
        logger.debug("Discarded failure of sibling request: %s", task.exception())


class GenerationClient:
    """Issue the structured resume request and the cover letter request together."""

    def __init__(self, llm_service: Optional[LLMService] = None):
        """
        Initialize generation client.

        Args:
            llm_service: LLM transport (creates a default one if None)
        """
        self.llm_service = llm_service or LLMService()

    async def generate(self, job_target: str, experience: str, skills: str) -> RawGeneration:
        """
        Generate the raw resume JSON and cover letter text.

        Both requests are dispatched before either is awaited. The first failure
        aborts the cycle; the other request is left to finish and its outcome is
        discarded.

        Args:
            job_target: Target role
            experience: Free-text job history
            skills: Free-text skills

        Returns:
            RawGeneration: Structured resume text and cover letter text

        Raises:
            GenerationError: If either request fails or returns unusable output
        """
        prompts = build_prompts(job_target, experience, skills)

        resume_task = asyncio.ensure_future(
            self.llm_service.generate(
                prompt=prompts.resume,
                temperature=0.5,
                response_format=RESUME_SCHEMA,
            )
        )
        cover_letter_task = asyncio.ensure_future(
            self.llm_service.generate(
                prompt=prompts.cover_letter,
                temperature=0.7,
            )
        )
        logger.info("Dispatched resume and cover letter requests for %r", job_target)

        try:
            resume_text, cover_letter_text = await asyncio.gather(resume_task, cover_letter_task)
        except GenerationError:
            self._detach(resume_task, cover_letter_task)
            raise
        except Exception as e:
            self._detach(resume_task, cover_letter_task)
            raise GenerationError(f"Generation failed: {str(e)}") from e

        resume_json = strip_code_fence(resume_text)
        try:
            decoded = json.loads(resume_json)
        except ValueError as e:
            raise GenerationError("Structured resume response is not valid JSON") from e
        if not isinstance(decoded, dict):
            raise GenerationError("Structured resume response is not a JSON object")

        if not cover_letter_text.strip():
            raise GenerationError("Cover letter response is empty")

        return RawGeneration(resume_json=resume_json, cover_letter=cover_letter_text)

    @staticmethod
    def _detach(*tasks: "asyncio.Task[str]") -> None:
        for task in tasks:
            if task.done():
                if not task.cancelled():
                    task.exception()
            else:
                task.add_done_callback(_discard_outcome)
