"""Illustrative image URL extraction."""

import re
from typing import Optional

from bs4 import BeautifulSoup

MARKDOWN_IMAGE_PATTERN = re.compile(r"!\[[^\]]*\]\(\s*<?([^)\s>]+)")


def extract_image_url(text: str) -> Optional[str]:
    """Return the first ``<img src>`` URL, falling back to the first markdown image."""
    if "<img" in text.lower():
        soup = BeautifulSoup(text, "lxml")
        img = soup.find("img", src=True)
        if img and img["src"].strip():
            return img["src"].strip()

    match = MARKDOWN_IMAGE_PATTERN.search(text)
    return match.group(1) if match else None
