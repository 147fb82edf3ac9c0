"""Tests for prompt construction."""

from resume_architect.services.prompt_builder import (
    build_cover_letter_prompt,
    build_prompts,
    build_resume_prompt,
)

JOB = "Senior Frontend Developer"
EXPERIENCE = "3 years at Acme building React apps"
SKILLS = "React, TypeScript, communication"


def test_prompts_are_deterministic():
    """Test that identical inputs give identical prompts."""
    assert build_prompts(JOB, EXPERIENCE, SKILLS) == build_prompts(JOB, EXPERIENCE, SKILLS)


def test_resume_prompt_embeds_inputs_quoted():
    """Test that the resume prompt quotes every input verbatim."""
    prompt = build_resume_prompt(JOB, EXPERIENCE, SKILLS)

    assert f'Job Target: "{JOB}"' in prompt
    assert f'Experience: "{EXPERIENCE}"' in prompt
    assert f'Skills: "{SKILLS}"' in prompt


def test_resume_prompt_instructions():
    """Test the resume prompt covers defaults, parsing and education."""
    prompt = build_resume_prompt(JOB, EXPERIENCE, SKILLS)

    assert "Alex Doe" in prompt
    assert "alex.doe@email.com" in prompt
    assert "123-456-7890" in prompt
    assert "action verbs" in prompt
    assert "'technical' and 'soft'" in prompt
    assert "3-4 sentences" in prompt
    assert "exactly one relevant education entry" in prompt


def test_cover_letter_prompt_instructions():
    """Test the cover letter prompt addresses the hiring manager."""
    prompt = build_cover_letter_prompt(JOB, EXPERIENCE, SKILLS)

    assert "'Hiring Manager'" in prompt
    assert "3-4 paragraphs" in prompt
    assert "professional yet personable" in prompt
    assert f'Job Target: "{JOB}"' in prompt


def test_prompts_differ_per_input():
    """Test that the job target changes the prompt text."""
    first = build_prompts(JOB, EXPERIENCE, SKILLS)
    second = build_prompts("Data Engineer", EXPERIENCE, SKILLS)

    assert first.resume != second.resume
    assert first.cover_letter != second.cover_letter
