"""Heading-based markdown segmentation."""

import re
from dataclasses import dataclass

# "## Name" or "### Name", with optional closing hashes ("## Name ##")
HEADING_PATTERN = re.compile(r"^(#{2,3})[ \t]+(\S.*?)(?:[ \t]+#+)?[ \t]*$")

# "3. ", "1.2. ", "4) ", "12 " but not "3D Render", "16:9 Banner" or "3.5mm Look"
ORDINAL_PREFIX = re.compile(r"^\d+(?:\.\d+)*[.):]?[ \t]+")


@dataclass
class DocumentSection:
    """One heading-delimited region of a markdown document."""

    heading_level: int
    name: str
    body: str = ""


def split_sections(markdown: str) -> list[DocumentSection]:
    """Split a markdown document into depth-2 and depth-3 sections.

    Every ``##``/``###`` heading line closes the open section and starts a
    new one; other lines are appended to the open section's body. Text before
    the first heading is dropped.
    """
    sections: list[DocumentSection] = []
    level = 0
    name = ""
    body_lines: list[str] = []

    for line in markdown.splitlines():
        match = HEADING_PATTERN.match(line)
        if match:
            if level:
                sections.append(DocumentSection(level, name, "\n".join(body_lines)))
            level = len(match.group(1))
            name = match.group(2).strip()
            body_lines = []
        elif level:
            body_lines.append(line)

    if level:
        sections.append(DocumentSection(level, name, "\n".join(body_lines)))

    return sections


def strip_ordinal(heading: str) -> str:
    """Remove leading ordinal numbering from a heading, keeping it if nothing remains."""
    stripped = ORDINAL_PREFIX.sub("", heading.strip(), count=1).strip()
    return stripped or heading.strip()
