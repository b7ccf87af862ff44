"""Unit tests for core/parse.py"""

import pytest
from pathlib import Path

from mdimport.core.models import ParsedDoc
from mdimport.core.parse import _strip_frontmatter, parse_file, parse_text


def test_strip_frontmatter_with_yaml():
    """_strip_frontmatter extracts YAML header and returns body."""
    fm, body = _strip_frontmatter("---\ntitle: Hello\n---\n# Body\n")
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_strip_frontmatter_with_toml():
    """A +++ TOML header is accepted as front matter too."""
    fm, body = _strip_frontmatter('+++\ntitle = "Hello"\ntags = ["a"]\n+++\n# Body\n')
    assert fm == {"title": "Hello", "tags": ["a"]}
    assert body == "# Body\n"


def test_strip_frontmatter_no_frontmatter():
    """_strip_frontmatter returns empty dict and full text when no header."""
    text = "# No frontmatter\n"
    assert _strip_frontmatter(text) == ({}, text)


def test_strip_frontmatter_invalid_yaml():
    """Malformed YAML is a fatal ValueError."""
    with pytest.raises(ValueError, match="Invalid YAML frontmatter"):
        _strip_frontmatter("---\ntitle: [unclosed\n---\nBody\n")


def test_strip_frontmatter_not_a_mapping():
    """A YAML list header is rejected."""
    with pytest.raises(ValueError, match="expected a mapping"):
        _strip_frontmatter("---\n- a\n- b\n---\nBody\n")


def test_parse_text_tokens_and_stem(mdit, sample_md):
    """parse_text tokenizes the body and takes the stem from the path."""
    doc = parse_text(sample_md, Path("drafts/my-post.md"), mdit)
    assert isinstance(doc, ParsedDoc)
    assert doc.stem == "my-post"
    assert doc.frontmatter["tags"] == ["a", "b", "c"]
    assert not doc.markdown.startswith("---")
    fences = [t for t in doc.tokens if t.type == "fence"]
    assert [t.info for t in fences] == ["mermaid", "python"]


def test_parse_file_reads_utf8(tmp_path, mdit):
    """parse_file reads UTF-8 content from disk."""
    f = tmp_path / "post.md"
    f.write_text("---\ntitle: Café\n---\n\nBody ✓\n", encoding="utf-8")
    doc = parse_file(f, mdit)
    assert doc.frontmatter == {"title": "Café"}
    assert doc.raw_markdown.startswith("---")


@pytest.mark.parametrize("text", ["---\n---\n\nBody\n", "+++\n+++\n\nBody\n"])
def test_strip_frontmatter_empty_block(text):
    """An empty header is still front matter, not a pair of thematic breaks."""
    fm, body = _strip_frontmatter(text)
    assert fm == {}
    assert body.strip() == "Body"
