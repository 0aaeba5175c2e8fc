"""Mapping of free-text category labels onto the fixed taxonomy.

Three tables live here, one per use:

* ``CATEGORY_SYNONYMS``: the full multilingual table used for inline
  "Category - Title" labels. Exact match first, then containment in either
  direction, first entry in declaration order wins.
* ``NESTED_SECTION_KEYWORDS``: coarse keyword list for "## N. Section" headings
  of the nested-heading convention.
* ``SECTION_TO_CATEGORY``: section-name table for the flat-heading convention.

None of the resolvers raise; anything unrecognised resolves to ``other``.
"""

from collections.abc import Mapping

from ..catalog.schema import CategoryId
from .segmenter import strip_ordinal

C = CategoryId

CATEGORY_SYNONYMS: dict[str, CategoryId] = {
    # Taxonomy names
    "photorealism": C.PHOTOREALISM,
    "creative": C.CREATIVE,
    "education": C.EDUCATION,
    "ecommerce": C.ECOMMERCE,
    "e-commerce": C.ECOMMERCE,
    "marketing": C.MARKETING,
    "avatar": C.AVATAR,
    "interior": C.INTERIOR,
    "editing": C.EDITING,
    "workplace": C.WORKPLACE,
    "daily": C.DAILY,
    # Synonyms (English and Japanese)
    "プロフィール": C.AVATAR,
    "アバター": C.AVATAR,
    "profile": C.AVATAR,
    "ソーシャルメディア": C.MARKETING,
    "social media": C.MARKETING,
    "インフォグラフィック": C.EDUCATION,
    "教育": C.EDUCATION,
    "infographic": C.EDUCATION,
    "youtube": C.MARKETING,
    "コミック": C.CREATIVE,
    "comic": C.CREATIVE,
    "storyboard": C.CREATIVE,
    "プロダクト": C.ECOMMERCE,
    "product": C.ECOMMERCE,
    "ゲーム": C.CREATIVE,
    "game": C.CREATIVE,
    "ポスター": C.MARKETING,
    "poster": C.MARKETING,
    "flyer": C.MARKETING,
    "アプリ": C.CREATIVE,
    "web": C.CREATIVE,
    "design": C.CREATIVE,
    "写真": C.PHOTOREALISM,
    "photography": C.PHOTOREALISM,
    "シネマティック": C.CREATIVE,
    "cinematic": C.CREATIVE,
    "アニメ": C.CREATIVE,
    "anime": C.CREATIVE,
    "イラスト": C.CREATIVE,
    "illustration": C.CREATIVE,
    "スケッチ": C.CREATIVE,
    "sketch": C.CREATIVE,
    "3d": C.CREATIVE,
    "render": C.CREATIVE,
    "ピクセル": C.CREATIVE,
    "pixel": C.CREATIVE,
    "油絵": C.CREATIVE,
    "oil painting": C.CREATIVE,
    "水彩": C.CREATIVE,
    "watercolor": C.CREATIVE,
    "レトロ": C.CREATIVE,
    "retro": C.CREATIVE,
    "vintage": C.CREATIVE,
    "サイバーパンク": C.CREATIVE,
    "cyberpunk": C.CREATIVE,
    "ミニマリズム": C.CREATIVE,
    "minimalism": C.CREATIVE,
    "ポートレート": C.PHOTOREALISM,
    "portrait": C.PHOTOREALISM,
    "インフルエンサー": C.MARKETING,
    "influencer": C.MARKETING,
    "キャラクター": C.CREATIVE,
    "character": C.CREATIVE,
    "製品": C.ECOMMERCE,
    "食品": C.ECOMMERCE,
    "food": C.ECOMMERCE,
    "ファッション": C.ECOMMERCE,
    "fashion": C.ECOMMERCE,
    "動物": C.CREATIVE,
    "animal": C.CREATIVE,
    "車両": C.CREATIVE,
    "vehicle": C.CREATIVE,
    "建築": C.INTERIOR,
    "architecture": C.INTERIOR,
    "インテリア": C.INTERIOR,
    "風景": C.CREATIVE,
    "landscape": C.CREATIVE,
    "街並み": C.CREATIVE,
    "cityscape": C.CREATIVE,
    "図": C.EDUCATION,
    "diagram": C.EDUCATION,
    "chart": C.EDUCATION,
    "テキスト": C.CREATIVE,
    "text": C.CREATIVE,
    "typography": C.CREATIVE,
    "編集": C.EDITING,
    "edit": C.EDITING,
    "ビジネス": C.WORKPLACE,
    "business": C.WORKPLACE,
    "翻訳": C.DAILY,
    "translation": C.DAILY,
}

NESTED_SECTION_KEYWORDS: list[tuple[tuple[str, ...], CategoryId]] = [
    (("photorealism",), C.PHOTOREALISM),
    (("creative",), C.CREATIVE),
    (("education",), C.EDUCATION),
    (("e-commerce", "virtual studio"), C.ECOMMERCE),
    (("workplace", "productivity"), C.WORKPLACE),
    (("photo editing", "restoration"), C.EDITING),
    (("interior",), C.INTERIOR),
    (("social media", "marketing"), C.MARKETING),
    (("daily life", "translation"), C.DAILY),
    (("social networking", "avatar"), C.AVATAR),
]

SECTION_TO_CATEGORY: dict[str, CategoryId] = {
    "photorealism & aesthetics": C.PHOTOREALISM,
    "photorealism": C.PHOTOREALISM,
    "creative experiments": C.CREATIVE,
    "creative": C.CREATIVE,
    "education & knowledge": C.EDUCATION,
    "education": C.EDUCATION,
    "e-commerce & virtual studio": C.ECOMMERCE,
    "ecommerce": C.ECOMMERCE,
    "workplace & productivity": C.WORKPLACE,
    "workplace": C.WORKPLACE,
    "photo editing & restoration": C.EDITING,
    "photo editing": C.EDITING,
    "interior design": C.INTERIOR,
    "interior": C.INTERIOR,
    "social media & marketing": C.MARKETING,
    "marketing": C.MARKETING,
    "daily life & translation": C.DAILY,
    "daily life": C.DAILY,
    "social networking & avatars": C.AVATAR,
    "avatar": C.AVATAR,
}


def _lookup(label: str, table: Mapping[str, CategoryId]) -> CategoryId:
    """Exact match, then two-way containment in table order, else ``other``."""
    normalized = label.lower().strip()
    if not normalized:
        return C.OTHER

    exact = table.get(normalized)
    if exact is not None:
        return exact

    for key, category in table.items():
        if key in normalized or normalized in key:
            return category

    return C.OTHER


def normalize_category(label: str) -> CategoryId:
    """Resolve a free-text, possibly non-English category label."""
    return _lookup(label, CATEGORY_SYNONYMS)


def resolve_section_category(heading: str) -> CategoryId:
    """Resolve a flat-heading "## Section" name."""
    return _lookup(strip_ordinal(heading), SECTION_TO_CATEGORY)


def resolve_nested_category(heading: str) -> CategoryId:
    """Resolve a nested-heading "## N. Section" name by keyword containment."""
    normalized = strip_ordinal(heading).lower()
    for keywords, category in NESTED_SECTION_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return category
    return C.OTHER
