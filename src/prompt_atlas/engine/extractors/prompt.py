"""Prompt body extraction from fenced code blocks."""

import json
import re
from typing import Optional

# ```lang\n ... ``` (language tag optional and ignored)
CODE_BLOCK_PATTERN = re.compile(r"```(?:[\w+.-]*[ \t]*\r?\n)?(.*?)```", re.DOTALL)

# "**Prompt:**", "- Prompt:" at the start of a line, directly followed by a code fence
LABELED_PROMPT_PATTERN = r"^[ \t>*_-]*{label}\s*[:：](?:\*\*)?\s*(?=```)"


def extract_prompt_body(text: str) -> Optional[str]:
    """Return the trimmed contents of the first fenced code block.

    A block holding a JSON string literal (``"..."``) is unwrapped to the
    string value; objects, arrays and plain text come back verbatim.
    """
    match = CODE_BLOCK_PATTERN.search(text)
    if not match:
        return None

    prompt = match.group(1).strip()
    if not prompt:
        return None

    if prompt.startswith('"') and prompt.endswith('"'):
        try:
            parsed = json.loads(prompt)
        except json.JSONDecodeError:
            return prompt
        if isinstance(parsed, str) and parsed.strip():
            return parsed

    return prompt


def extract_labeled_prompt(text: str, label: str = "Prompt") -> Optional[str]:
    """Return the code block that immediately follows a ``Prompt:`` marker."""
    pattern = re.compile(LABELED_PROMPT_PATTERN.format(label=re.escape(label)), re.IGNORECASE | re.MULTILINE)
    match = pattern.search(text)
    if not match:
        return None
    return extract_prompt_body(text[match.end():])
