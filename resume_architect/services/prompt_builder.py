"""Prompt construction for resume and cover letter generation."""

from typing import NamedTuple

DEFAULT_NAME = "Alex Doe"
DEFAULT_EMAIL = "alex.doe@email.com"
DEFAULT_PHONE = "123-456-7890"


class GenerationPrompts(NamedTuple):
    """Instruction pair for one generation cycle."""

    resume: str
    cover_letter: str


def _user_details(job_target: str, experience: str, skills: str) -> str:
    return (
        f'Job Target: "{job_target}"\n'
        f'Experience: "{experience}"\n'
        f'Skills: "{skills}"'
    )


def build_resume_prompt(job_target: str, experience: str, skills: str) -> str:
    """
    Build the instruction for structured resume generation.

    Args:
        job_target: Target role
        experience: Free-text job history
        skills: Free-text skills

    Returns:
        str: Resume instruction
    """
    return f"""You are an expert resume writer and career advisor. Generate a professional resume in JSON format based on the following details.

Instructions:
1. If the user gives no personal details, use the name {DEFAULT_NAME}, the email {DEFAULT_EMAIL} and the phone {DEFAULT_PHONE}. You can invent a LinkedIn profile URL.
2. Carefully parse the 'Experience' text into distinct job roles, each with 3-5 achievements starting with action verbs.
3. Categorize the provided skills into 'technical' and 'soft'.
4. Write a powerful, concise professional summary of 3-4 sentences tailored to the job target.
5. If no education is given, invent exactly one relevant education entry.

{_user_details(job_target, experience, skills)}
"""


def build_cover_letter_prompt(job_target: str, experience: str, skills: str) -> str:
    """
    Build the instruction for freeform cover letter generation.

    Args:
        job_target: Target role
        experience: Free-text job history
        skills: Free-text skills

    Returns:
        str: Cover letter instruction
    """
    return f"""You are a professional career coach. Write a compelling, modern and tailored cover letter for the following job target, based on the user's experience and skills.

Instructions:
1. Address the letter to the 'Hiring Manager'.
2. Keep it professional yet personable.
3. Highlight how the user's skills and experience directly align with the job target.
4. Keep it concise, around 3-4 paragraphs separated by line breaks.
5. Use the name {DEFAULT_NAME}.

{_user_details(job_target, experience, skills)}
"""


def build_prompts(job_target: str, experience: str, skills: str) -> GenerationPrompts:
    """Build both instructions for one generation cycle."""
    return GenerationPrompts(
        resume=build_resume_prompt(job_target, experience, skills),
        cover_letter=build_cover_letter_prompt(job_target, experience, skills),
    )
