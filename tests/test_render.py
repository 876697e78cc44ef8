"""Tests for the render pipeline: front-matter, markdown extensions, math, highlighting, heading ids."""

import pytest
from unittest.mock import patch

from bs4 import BeautifulSoup

from juncodes.config.models import RenderConfig
from juncodes.errors import ContentError, RenderError
from juncodes.render import (
    Document,
    FrontmatterExtractor,
    HeadingSlugger,
    MarkdownConverter,
    TransformPipeline,
    create_pipeline,
    estimate_reading_time,
    slugify_heading,
    split_frontmatter,
)


def render(text: str, **config) -> str:
    return create_pipeline(RenderConfig(**config)).process(text).html


# ---------------------------------------------------------------------------
# split_frontmatter / FrontmatterExtractor
# ---------------------------------------------------------------------------


class TestSplitFrontmatter:
    def test_no_frontmatter(self):
        assert split_frontmatter("# Title\n") == (None, "# Title\n")

    def test_splits_block(self):
        yaml_str, body = split_frontmatter("---\ntitle: x\n---\nbody\n")
        assert yaml_str == "title: x\n"
        assert body == "body\n"

    def test_empty_block(self):
        yaml_str, body = split_frontmatter("---\n---\nbody")
        assert yaml_str == ""
        assert body == "body"

    def test_unterminated_block_is_body(self):
        text = "---\ntitle: x\nno closing marker\n"
        assert split_frontmatter(text) == (None, text)

    def test_later_horizontal_rule_stays_in_body(self):
        yaml_str, body = split_frontmatter("---\na: 1\n---\nabove\n\n---\n\nbelow\n")
        assert yaml_str == "a: 1\n"
        assert "---" in body
        assert "below" in body


class TestFrontmatterExtractor:
    def _apply(self, text):
        doc = Document(source=text, body=text)
        FrontmatterExtractor().apply(doc)
        return doc

    def test_parses_mapping(self):
        doc = self._apply("---\ntitle: Hi\ntags:\n  - a\n  - b\n---\nBody")
        assert doc.frontmatter == {"title": "Hi", "tags": ["a", "b"]}
        assert doc.body == "Body"

    def test_missing_block_gives_empty_dict(self):
        doc = self._apply("Just text")
        assert doc.frontmatter == {}
        assert doc.body == "Just text"

    def test_empty_block_gives_empty_dict(self):
        assert self._apply("---\n---\nBody").frontmatter == {}

    def test_invalid_yaml_raises(self):
        with pytest.raises(RenderError) as exc_info:
            self._apply("---\ntitle: [unclosed\n---\nBody")
        assert exc_info.value.stage == "frontmatter"
        assert isinstance(exc_info.value, ContentError)

    def test_non_mapping_raises(self):
        with pytest.raises(RenderError, match="mapping"):
            self._apply("---\n- a\n- b\n---\nBody")


# ---------------------------------------------------------------------------
# Pipeline basics
# ---------------------------------------------------------------------------


class TestPipeline:
    def test_plain_paragraph(self):
        result = create_pipeline().process("---\ntitle: Secret Title\n---\n\nHello plain world.\n")
        assert "<p>Hello plain world.</p>" in result.html
        assert "Secret Title" not in result.html
        assert "---" not in result.html
        assert result.frontmatter == {"title": "Secret Title"}

    def test_empty_pipeline_returns_body(self):
        assert TransformPipeline([]).process("raw").html == "raw"

    def test_tree_stage_before_markdown_raises(self):
        pipeline = TransformPipeline([HeadingSlugger()])
        with pytest.raises(RenderError, match="no HTML tree"):
            pipeline.process("# Title")

    def test_stages_run_in_order(self):
        pipeline = TransformPipeline([FrontmatterExtractor(), MarkdownConverter()])
        html = pipeline.process("---\na: 1\n---\n# Title\n").html
        assert "<h1>Title</h1>" in html


# ---------------------------------------------------------------------------
# Markdown extensions
# ---------------------------------------------------------------------------


class TestMarkdownExtensions:
    def test_table(self):
        html = render("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_strikethrough(self):
        assert "<del>gone</del>" in render("This is ~~gone~~ now.")

    def test_single_tilde_is_not_subscript(self):
        assert "<sub>" not in render("H~2~O")

    def test_autolink(self):
        html = render("See https://example.com for more.")
        assert 'href="https://example.com"' in html

    def test_task_list(self):
        html = render("- [x] done\n- [ ] todo\n")
        assert "task-list-item" in html
        assert 'type="checkbox"' in html


# ---------------------------------------------------------------------------
# Math
# ---------------------------------------------------------------------------


class TestMathRenderer:
    def test_inline_math(self):
        html = render("Energy is $E = mc^2$ here.")
        soup = BeautifulSoup(html, "html.parser")
        node = soup.find("span", class_="math-inline")
        assert node is not None
        assert node.find("math") is not None

    def test_block_math(self):
        html = render("$$\n\\frac{a}{b}\n$$\n")
        soup = BeautifulSoup(html, "html.parser")
        node = soup.find("div", class_="math-display")
        assert node is not None
        assert node.find("math") is not None

    def test_dollar_inside_code_is_not_math(self):
        html = render("```\necho $HOME and $PATH\n```\n")
        assert "<math" not in html
        assert "$HOME" in html

    def test_malformed_math_raises_by_default(self):
        with patch("juncodes.render.math.latex_to_mathml", side_effect=ValueError("bad tex")):
            with pytest.raises(RenderError) as exc_info:
                render("Broken $\\frac{1}$ math.")
        assert exc_info.value.stage == "math"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_malformed_math_kept_as_source(self):
        with patch("juncodes.render.math.latex_to_mathml", side_effect=ValueError("bad tex")):
            html = render("Broken $\\frac{1}$ math.", math_errors="source")
        assert "math-error" in html
        assert "\\frac{1}" in html
        assert "<math" not in html

    def test_unknown_policy_rejected(self):
        from juncodes.render.math import MathRenderer

        with pytest.raises(ValueError):
            MathRenderer(on_error="ignore")


# ---------------------------------------------------------------------------
# Syntax highlighting
# ---------------------------------------------------------------------------


class TestSyntaxHighlighter:
    def test_supported_language_is_highlighted(self):
        html = render("```rust\nfn main() {}\n```\n")
        soup = BeautifulSoup(html, "html.parser")
        block = soup.find("div", class_="highlight")
        assert block is not None
        assert block["data-language"] == "rust"
        assert block.find("span", style=True) is not None
        assert "language-rust" not in html

    def test_unknown_language_stays_plain(self):
        html = render("```brainfudge\n+++.\n```\n")
        assert '<pre><code class="language-brainfudge">' in html
        assert "highlight" not in html

    def test_language_outside_allow_list_stays_plain(self):
        html = render("```python\nprint(1)\n```\n", languages=["rust"])
        assert '<pre><code class="language-python">' in html
        assert "highlight" not in html

    def test_block_without_language_stays_plain(self):
        html = render("```\nplain text\n```\n")
        assert "<pre><code>plain text" in html

    def test_code_text_is_preserved(self):
        html = render("```json\n{\"key\": 1}\n```\n")
        text = BeautifulSoup(html, "html.parser").get_text()
        assert '"key"' in text


# ---------------------------------------------------------------------------
# Heading ids
# ---------------------------------------------------------------------------


class TestSlugifyHeading:
    def test_lowercases_and_hyphenates(self):
        assert slugify_heading("Getting Started") == "getting-started"

    def test_strips_punctuation(self):
        assert slugify_heading("Hello, World!") == "hello-world"

    def test_keeps_hyphens_and_digits(self):
        assert slugify_heading("Step 2 - set-up") == "step-2---set-up"

    def test_empty_falls_back(self):
        assert slugify_heading("!!!") == "section"


class TestHeadingSlugger:
    def test_assigns_ids(self):
        html = render("# Getting Started\n\n## Why Rust?\n")
        assert '<h1 id="getting-started">' in html
        assert '<h2 id="why-rust">' in html

    def test_duplicates_get_suffixes(self):
        html = render("## Intro\n\ntext\n\n## Intro\n\nmore\n\n## Intro\n")
        soup = BeautifulSoup(html, "html.parser")
        assert [h["id"] for h in soup.find_all("h2")] == ["intro", "intro-1", "intro-2"]

    def test_duplicates_kept_when_not_unique(self):
        html = render("## Intro\n\ntext\n\n## Intro\n", unique_heading_ids=False)
        soup = BeautifulSoup(html, "html.parser")
        assert [h["id"] for h in soup.find_all("h2")] == ["intro", "intro"]

    def test_id_uses_visible_text(self):
        html = render("## Using `cargo` *well*\n")
        assert 'id="using-cargo-well"' in html


# ---------------------------------------------------------------------------
# Reading time
# ---------------------------------------------------------------------------


class TestReadingTime:
    def test_counts_visible_words_only(self):
        assert estimate_reading_time("<p>one <b>two</b> three</p>", 3) == 1.0

    def test_empty_html(self):
        assert estimate_reading_time("", 200) == 0.0

    def test_monotonic_in_word_count(self):
        short = render("word " * 50)
        longer = render("word " * 500)
        assert estimate_reading_time(short) <= estimate_reading_time(longer)
        assert estimate_reading_time(short) < estimate_reading_time(longer)

    def test_rejects_non_positive_speed(self):
        with pytest.raises(ValueError):
            estimate_reading_time("<p>x</p>", 0)
