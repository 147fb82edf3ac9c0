"""Exceptions raised by the generation, assembly and export services."""


class ResumeArchitectError(Exception):
    """Base class for all Resume Architect errors."""


class GenerationError(ResumeArchitectError):
    """A generation request failed or returned unusable output."""


class MalformedResumeError(ResumeArchitectError):
    """The structured resume response does not match the resume schema."""


class ExportError(ResumeArchitectError):
    """Snapshot capture or PDF assembly failed."""
