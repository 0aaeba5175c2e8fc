"""Attribution (source link) extraction."""

import re
from typing import Optional

# "- **Source:**", "*Source:", "**ソース:**", "出典："
SOURCE_LABEL_PATTERN = re.compile(r"(?<!\w)(?:source|ソース|出典)[ \t]*(?:\*\*)?[ \t]*[:：]", re.IGNORECASE)

MARKDOWN_LINK_PATTERN = re.compile(r"(?<!!)\[([^\]]+)\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")

URL_PATTERN = re.compile(r"https?://[^\s)\]>\"'*]+")

PREFERRED_LINK_TEXTS = {"post", "link", "source", "tweet", "original"}


def extract_source_url(text: str) -> Optional[str]:
    """Return the citation URL from a labeled source line.

    A link whose visible text is one of ``PREFERRED_LINK_TEXTS`` wins; otherwise
    the first URL after the label is used.
    """
    for line in text.splitlines():
        label = SOURCE_LABEL_PATTERN.search(line)
        if not label:
            continue

        tail = line[label.end():]
        for link_text, url in MARKDOWN_LINK_PATTERN.findall(tail):
            if link_text.strip().strip("*_").lower() in PREFERRED_LINK_TEXTS:
                return url

        url_match = URL_PATTERN.search(tail)
        if url_match:
            return url_match.group(0)

    return None
