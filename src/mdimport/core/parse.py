"""Frontmatter extraction and markdown-it tokenization"""

import re
import tomllib
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt
from mdformat.renderer import MDRenderer

from mdimport.config import Settings
from mdimport.core.models import ParsedDoc
from mdimport.core.style import MarkdownStyle


FRONTMATTER_RE = re.compile(r'^---\s*\n(?:(.*?)\n)?---\s*(?:\n|$)', re.DOTALL)
TOML_FRONTMATTER_RE = re.compile(r'^\+\+\+\s*\n(?:(.*?)\n)?\+\+\+\s*(?:\n|$)', re.DOTALL)


def make_parser(settings: Settings) -> MarkdownIt:
    """Build a CommonMark MarkdownIt instance that renders back to Markdown via mdformat."""
    mdit = MarkdownIt("commonmark", renderer_cls=MDRenderer)
    mdit.options["store_labels"] = True
    mdit.options["mdformat"] = {"number": settings.number, "wrap": "keep"}
    mdit.options["parser_extension"] = [MarkdownStyle(settings)]
    return mdit


def _load_mapping(block: str, loader, kind: str) -> dict[str, Any]:
    """Parse a frontmatter block, requiring a mapping."""
    try:
        fm = loader(block) or {}
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ValueError(f"Invalid {kind} frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise ValueError(f"Invalid {kind} frontmatter: expected a mapping, got {type(fm).__name__}")
    return fm


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML (---) or TOML (+++) header removed."""
    if m := FRONTMATTER_RE.match(text):
        return _load_mapping(m.group(1) or "", yaml.safe_load, "YAML"), text[m.end():]
    if m := TOML_FRONTMATTER_RE.match(text):
        return _load_mapping(m.group(1) or "", tomllib.loads, "TOML"), text[m.end():]
    return {}, text


def parse_text(text: str, path: Path, mdit: MarkdownIt) -> ParsedDoc:
    """Split frontmatter from text and tokenize the body."""
    frontmatter, body = _strip_frontmatter(text)
    env: dict = {}
    tokens = mdit.parse(body, env)
    return ParsedDoc(
        path=path,
        stem=path.stem,
        raw_markdown=text,
        markdown=body,
        frontmatter=frontmatter,
        tokens=tokens,
        env=env,
    )


def parse_file(path: Path, mdit: MarkdownIt) -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc with token stream."""
    return parse_text(path.read_text(encoding='utf-8'), path, mdit)
