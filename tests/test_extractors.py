"""Tests for prompt_atlas.engine.extractors package."""

import pytest

from prompt_atlas.engine.extractors import (
    extract_emphasis_description,
    extract_first_line,
    extract_image_url,
    extract_labeled_description,
    extract_labeled_prompt,
    extract_prompt_body,
    extract_source_url,
    first_match,
)


class TestExtractPromptBody:
    """Tests for extract_prompt_body."""

    def test_plain_block(self):
        """Test extracting a fenced block without a language tag."""
        assert extract_prompt_body("intro\n```\n  Make a festive banner \n```\n") == "Make a festive banner"

    def test_language_tag_ignored(self):
        """Test that the language tag is not part of the prompt."""
        assert extract_prompt_body("```text\nA cat\n```") == "A cat"

    def test_language_tag_ignored_with_crlf(self):
        assert extract_prompt_body("```text\r\nMake a festive banner\r\n```") == "Make a festive banner"

    def test_first_block_wins(self):
        """Test that only the first fenced block is used."""
        body = "```\nfirst\n```\n\n```\nsecond\n```"
        assert extract_prompt_body(body) == "first"

    def test_multiline_prompt(self):
        body = "```\nline one\n\nline two\n```"
        assert extract_prompt_body(body) == "line one\n\nline two"

    def test_single_line_fence(self):
        """Test a block whose content sits on the fence line."""
        assert extract_prompt_body("```Make a banner```") == "Make a banner"

    def test_json_string_literal_unwrapped(self):
        """Test that a JSON string literal is unwrapped."""
        assert extract_prompt_body('```\n"A dog on a \\"red\\" sofa"\n```') == 'A dog on a "red" sofa'

    def test_json_string_literal_value_kept_exactly(self):
        """Test that whitespace inside the JSON string value is preserved."""
        assert extract_prompt_body('```\n"  padded prompt\\n"\n```') == "  padded prompt\n"

    def test_json_object_kept_raw(self):
        """Test that JSON objects are returned verbatim."""
        raw = '{"prompt": "a cat", "style": "anime"}'
        assert extract_prompt_body(f"```json\n{raw}\n```") == raw

    def test_json_array_kept_raw(self):
        raw = '["a", "b"]'
        assert extract_prompt_body(f"```\n{raw}\n```") == raw

    def test_invalid_quoted_text_kept_raw(self):
        raw = '"unterminated "quote" text"'
        assert extract_prompt_body(f"```\n{raw}\n```") == raw

    @pytest.mark.parametrize("body", ["", "no code here", "```\n   \n```", "``` unterminated"])
    def test_absent_or_empty(self, body):
        assert extract_prompt_body(body) is None


class TestExtractLabeledPrompt:
    """Tests for extract_labeled_prompt."""

    def test_bold_label(self):
        assert extract_labeled_prompt("**Prompt:**\n```\nA portrait\n```") == "A portrait"

    def test_plain_label(self):
        assert extract_labeled_prompt("Prompt:\n\n```\nA portrait\n```") == "A portrait"

    def test_block_without_label(self):
        """Test that an unlabeled code block is ignored."""
        assert extract_labeled_prompt("```\nA portrait\n```") is None

    def test_label_followed_by_prose(self):
        """Test that the fence must follow the label directly."""
        assert extract_labeled_prompt("**Prompt:** see below\n```\nA portrait\n```") is None

    def test_label_inside_other_label_ignored(self):
        """Test that "Negative Prompt:" is not taken for the prompt marker."""
        body = "**Negative Prompt:**\n```\nblurry\n```\n\n**Prompt:**\n```\na cat\n```"
        assert extract_labeled_prompt(body) == "a cat"

    def test_list_item_label(self):
        assert extract_labeled_prompt("- **Prompt:**\n```\na cat\n```") == "a cat"

    def test_uses_block_after_label(self):
        body = "```\nsetup\n```\n**Prompt:**\n```\nreal prompt\n```"
        assert extract_labeled_prompt(body) == "real prompt"


class TestDescriptionExtractors:
    """Tests for the description extractors."""

    def test_labeled_heading(self):
        body = "#### 📖 説明\n\nレトロなポスター。\n二行目。\n\n#### 📝 プロンプト"
        assert extract_labeled_description(body) == "レトロなポスター。"

    def test_labeled_inline(self):
        assert extract_labeled_description("**Description:** A cozy room.") == "A cozy room."

    def test_labeled_stops_at_heading(self):
        assert extract_labeled_description("#### Description\n\n#### Prompt\ntext") is None

    def test_label_word_in_prose_ignored(self):
        assert extract_labeled_description("Description of the scene follows") is None

    def test_labeled_absent(self):
        assert extract_labeled_description("nothing here") is None

    def test_emphasis_line(self):
        assert extract_emphasis_description("\n*Recreate 35mm film.*\n\nmore") == "Recreate 35mm film."

    def test_underscore_emphasis(self):
        assert extract_emphasis_description("_Warm tones._") == "Warm tones."

    def test_bold_is_not_emphasis(self):
        assert extract_emphasis_description("**Prompt:**\n```\nx\n```") is None

    def test_emphasis_must_be_first_line(self):
        assert extract_emphasis_description("plain\n*later*") is None

    def test_first_line_skips_non_prose(self):
        body = '\n<img src="a.png">\n![x](b.png)\n```\ncode\n```\n> *Quoted summary.*\nrest'
        assert extract_first_line(body) == "Quoted summary."

    def test_first_line_absent(self):
        assert extract_first_line("```\nonly code\n```") is None


class TestExtractSourceUrl:
    """Tests for extract_source_url."""

    def test_bold_label_link(self):
        body = "- **Source:** [Post](https://x.com/a/status/1)"
        assert extract_source_url(body) == "https://x.com/a/status/1"

    def test_japanese_label(self):
        body = "- **ソース:** [Link](https://x.com/b/status/2)"
        assert extract_source_url(body) == "https://x.com/b/status/2"

    def test_emphasis_wrapped_label(self):
        assert extract_source_url("*Source: [Post](https://example.com/p)*") == "https://example.com/p"

    def test_prefers_expected_link_text(self):
        body = "Source: [@author](https://x.com/author) - [post](https://x.com/author/status/9)"
        assert extract_source_url(body) == "https://x.com/author/status/9"

    def test_falls_back_to_first_url(self):
        body = "Source: [@author](https://x.com/author)"
        assert extract_source_url(body) == "https://x.com/author"

    def test_bare_url(self):
        assert extract_source_url("出典: https://example.com/article.") == "https://example.com/article."

    def test_link_outside_source_line_ignored(self):
        assert extract_source_url("See [post](https://x.com/1)") is None

    def test_resources_is_not_a_label(self):
        assert extract_source_url("Resources: https://example.com") is None

    def test_absent(self):
        assert extract_source_url("") is None


class TestExtractImageUrl:
    """Tests for extract_image_url."""

    def test_img_tag(self):
        body = '<img src="https://cdn.example.com/a.png" width="300" />'
        assert extract_image_url(body) == "https://cdn.example.com/a.png"

    def test_img_tag_single_quotes(self):
        assert extract_image_url("<IMG alt='x' src='https://cdn.example.com/b.jpg'>") == "https://cdn.example.com/b.jpg"

    def test_img_tag_preferred_over_markdown(self):
        body = '![md](https://cdn.example.com/md.png)\n<img src="https://cdn.example.com/html.png">'
        assert extract_image_url(body) == "https://cdn.example.com/html.png"

    def test_markdown_image_fallback(self):
        assert extract_image_url("text ![preview](https://cdn.example.com/c.png) more") == "https://cdn.example.com/c.png"

    def test_plain_link_is_not_image(self):
        assert extract_image_url("[not an image](https://example.com)") is None

    def test_absent(self):
        assert extract_image_url("no media") is None


class TestFirstMatch:
    """Tests for first_match composition."""

    def test_first_success_wins(self):
        result = first_match("x", lambda _: None, lambda _: "second", lambda _: "third")
        assert result == "second"

    def test_empty_results_skipped(self):
        assert first_match("x", lambda _: "", lambda _: "value") == "value"

    def test_no_match(self):
        assert first_match("x", lambda _: None) is None
