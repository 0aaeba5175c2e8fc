"""Short description extraction."""

import re
from typing import Optional

# "#### 📖 説明", "**Description:** text", "- Description: text"
LABELED_DESCRIPTION_PATTERN = re.compile(
    r"^[^\w\n]*(?:説明|description)(?=[ \t*]*(?:[:：]|$))[ \t*:：]*(.*)$",
    re.IGNORECASE,
)

# "*text*" or "_text_", but not "**bold**"
EMPHASIS_PATTERN = re.compile(r"^(?:\*(?!\*)(.+?)(?<!\*)\*|_(?!_)(.+?)(?<!_)_)$")

NON_PROSE_PREFIXES = ("#", "<", "![", "|", "---")


def extract_labeled_description(text: str) -> Optional[str]:
    """Return the first line of text following a "description" label."""
    lines = text.splitlines()
    for index, line in enumerate(lines):
        match = LABELED_DESCRIPTION_PATTERN.match(line.strip())
        if not match:
            continue

        inline = match.group(1).strip().strip("*").strip()
        if inline:
            return inline

        for following in lines[index + 1:]:
            following = following.strip()
            if not following:
                continue
            if following.startswith(("#", "```")):
                return None
            return following
        return None

    return None


def extract_emphasis_description(text: str) -> Optional[str]:
    """Return the first non-empty line if it is wrapped in single emphasis markers."""
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = EMPHASIS_PATTERN.match(line)
        if not match:
            return None
        return (match.group(1) or match.group(2)).strip() or None
    return None


def extract_first_line(text: str) -> Optional[str]:
    """Return the first line of prose, skipping code blocks, images, tags and headings."""
    in_fence = False
    for line in text.splitlines():
        line = line.strip()
        if line.startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence or not line or line.startswith(NON_PROSE_PREFIXES):
            continue

        line = line.lstrip(">").strip()
        match = EMPHASIS_PATTERN.match(line)
        if match:
            line = (match.group(1) or match.group(2)).strip()
        if line:
            return line
    return None
