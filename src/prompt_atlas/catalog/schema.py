"""Pydantic models for prompt sources and extracted prompt records."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryId(str, Enum):
    """Closed prompt category taxonomy."""

    PHOTOREALISM = "photorealism"
    CREATIVE = "creative"
    EDUCATION = "education"
    ECOMMERCE = "ecommerce"
    MARKETING = "marketing"
    AVATAR = "avatar"
    INTERIOR = "interior"
    EDITING = "editing"
    WORKPLACE = "workplace"
    DAILY = "daily"
    OTHER = "other"


class Dialect(str, Enum):
    """README authoring conventions understood by the parser."""

    NESTED = "nested"      # "## N. Category" / "### N.M. Title" with **Prompt:** blocks
    FLAT = "flat"          # "## Category" / "### Title" with a bare code block
    NUMBERED = "numbered"  # "### No. N: Category - Title" blocks


@dataclass(frozen=True)
class Category:
    """Display metadata for one taxonomy entry."""

    id: CategoryId
    name: str
    description: str


CATEGORIES: list[Category] = [
    Category(CategoryId.PHOTOREALISM, "Photography & Portraits", "Photorealistic photos and portraits"),
    Category(CategoryId.CREATIVE, "Creative", "Art and experimental styles"),
    Category(CategoryId.EDUCATION, "Education & Diagrams", "Infographics and teaching material"),
    Category(CategoryId.ECOMMERCE, "E-commerce & Products", "Product shots and virtual try-on"),
    Category(CategoryId.MARKETING, "Marketing", "Advertising and social media visuals"),
    Category(CategoryId.AVATAR, "Avatars & Social", "Profile pictures and characters"),
    Category(CategoryId.INTERIOR, "Interior", "Room design and furniture layout"),
    Category(CategoryId.EDITING, "Photo Editing", "Retouching and background removal"),
    Category(CategoryId.WORKPLACE, "Business & Work", "Workplace and presentations"),
    Category(CategoryId.DAILY, "Daily Life & Translation", "Everyday life and language translation"),
    Category(CategoryId.OTHER, "Other", "Anything not covered above"),
]


class SourceConfig(BaseModel):
    """Static identity of one tracked README document."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo_name: str
    branch: str = "main"
    file_path: str = "README.md"
    source_id: str = Field(description="ID namespace for records from this source, e.g. 'zerolu'")
    dialect: str = Dialect.FLAT.value

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo_name}"

    @property
    def repository_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo_name}"


class PromptRecord(BaseModel):
    """One extracted, reusable prompt template."""

    id: str
    title: str
    prompt_text: str
    category: CategoryId = CategoryId.OTHER
    source_repository: str
    source_url: str
    language: str
    image_url: Optional[str] = None
    description: Optional[str] = None

    @field_validator("id", "title", "prompt_text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    def to_metadata(self) -> dict[str, str]:
        """Flat string metadata for the vector index (optional keys omitted)."""
        metadata = {
            "title": self.title,
            "prompt": self.prompt_text,
            "category": self.category.value,
            "source": self.source_repository,
            "sourceUrl": self.source_url,
            "language": self.language,
        }
        if self.image_url:
            metadata["imageUrl"] = self.image_url
        if self.description:
            metadata["description"] = self.description
        return metadata
