"""Shared pytest fixtures for Prompt Atlas tests."""

import pytest

from prompt_atlas.catalog.schema import Dialect, SourceConfig
from prompt_atlas.config import Settings


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings isolated from any local .env file."""
    monkeypatch.delenv("PROMPT_ATLAS_SOURCES_FILE", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def nested_source() -> SourceConfig:
    return SourceConfig(
        owner="ZeroLu",
        repo_name="awesome-nanobanana-pro",
        source_id="zerolu",
        dialect=Dialect.NESTED.value,
    )


@pytest.fixture
def numbered_source() -> SourceConfig:
    return SourceConfig(
        owner="YouMind-OpenLab",
        repo_name="awesome-nano-banana-pro-prompts",
        file_path="README_ja-JP.md",
        source_id="youmind",
        dialect=Dialect.NUMBERED.value,
    )


@pytest.fixture
def flat_source() -> SourceConfig:
    return SourceConfig(
        owner="example",
        repo_name="flat-prompts",
        source_id="flat",
        dialect=Dialect.FLAT.value,
    )


@pytest.fixture
def nested_readme() -> str:
    """README in the nested-heading convention."""
    return """# Awesome Nano Banana Pro

Intro text before any section.

## 1. Photorealism & Aesthetics

### 1.1. Vintage Film Portrait

*Recreate the look of 35mm film.*

<img src="https://example.com/film.jpg" width="300" />

**Prompt:**
```
A portrait shot on Kodak Portra 400, soft grain
```

*Source: [Post](https://x.com/someone/status/1)*

### 1.2. Missing Prompt Block

Just prose, no code.

## 3. Education & Knowledge

### 3.1. Whiteboard Explainer

**Prompt:**
```text
Draw a whiteboard diagram explaining photosynthesis
```

## 4. Something Unlisted

### 4.1. Mystery Prompt

**Prompt:**
```
Something odd
```
"""


@pytest.fixture
def numbered_readme() -> str:
    """README in the numbered-block convention."""
    return """# Awesome Nano Banana Pro Prompts

## 目次

### No. 1: ポスター - Retro Travel Poster

#### 📖 説明

レトロな旅行ポスターを作成します。
二行目は無視されます。

#### 📝 プロンプト

```
Create a retro travel poster of Kyoto
```

#### 🖼️ 生成画像

<img src="https://cdn.example.com/poster.png" alt="poster" />

#### 📌 詳細

- **ソース:** [Link](https://x.com/author/status/42)

### No. 2: プロフィール - Missing Code

No code block here.

### No. 3: Untitled Without Category

```json
{"prompt": "a cat", "style": "anime"}
```

![preview](https://cdn.example.com/cat.png)
"""


@pytest.fixture
def flat_readme() -> str:
    """README in the flat-heading convention."""
    return """# Flat Prompts

## Table of Contents

### Table of Contents

```
not a prompt
```

## Marketing

### 1. Holiday Banner

A festive banner for the storefront.

```
Make a festive banner
```

### 2. No Code

Nothing to see.

## Interior Design

### Cozy Living Room

*Warm tones and plants.*

```
A cozy living room with plants
```

## Resources

### License

```
MIT
```
"""
