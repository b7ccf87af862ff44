"""Serialization of the mutated token stream and output file writing"""

from pathlib import Path

import yaml
from markdown_it import MarkdownIt

from mdimport.core.models import FrontMatter


def render_body(mdit: MarkdownIt, tokens: list, env: dict) -> str:
    """Render tokens back to Markdown with the parser's mdformat renderer and style options."""
    return mdit.renderer.render(tokens, mdit.options, env)


def build_markdown(frontmatter: FrontMatter, body: str) -> str:
    """Return body with the YAML frontmatter block prepended (schema field order)."""
    header = yaml.dump(frontmatter.model_dump(), default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n\n{body.lstrip()}"


def write_doc(text: str, output_dir: Path, stem: str) -> Path:
    """Write <output_dir>/<stem>.md, replacing any existing file."""
    output_dir.mkdir(parents=True, exist_ok=True)
    out = output_dir / f"{stem}.md"
    out.write_text(text, encoding='utf-8')
    return out
