"""Helpers for cleaning generated text."""

import re

_CODE_FENCE = re.compile(r"^```[a-zA-Z0-9_-]*\s*\n(.*?)\n?```$", re.DOTALL)
_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.-]", re.UNICODE)


def strip_code_fence(text: str) -> str:
    """
    Remove a surrounding Markdown code fence from generated text.

    Example: "```json\\n{...}\\n```" -> "{...}"

    Args:
        text: Generated text

    Returns:
        str: Text without the fence, stripped of surrounding whitespace
    """
    stripped = text.strip()
    match = _CODE_FENCE.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def filename_stem(name: str) -> str:
    """
    Turn a person's name into a file name stem.

    Example: "Alex Doe" -> "Alex_Doe"

    Args:
        name: Display name

    Returns:
        str: Stem with whitespace runs replaced by underscores and
            characters unsafe in file names removed (may be empty)
    """
    joined = "_".join(name.split())
    return _UNSAFE_FILENAME_CHARS.sub("", joined)
