"""Intermediate data models for the import pipeline"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class FrontMatter(BaseModel):
    """Output front matter in the publishing platform's schema (field order is emit order)."""
    title: str
    published: bool = False
    description: str
    tags: str                       # comma-joined
    cover_image: str                # relative to the output file


class AssetCopy(BaseModel):
    """One planned copy of an asset file into the document's assets directory."""
    source: Path
    target: Path


class DiagramJob(BaseModel):
    """A diagram fence scheduled for rasterization."""
    index: int                      # zero-based, source order
    token_index: int                # position of the fence in the token stream
    source: str

    @property
    def name(self) -> str:
        return f"diagram-{self.index}.png"


class ImportResult(BaseModel):
    """Outcome of a single document import."""
    output_path: Path
    frontmatter: FrontMatter
    copied: list[Path] = []
    diagrams: list[str] = []
    failures: list[str] = []        # best-effort errors; the run still succeeded


@dataclass
class ParsedDoc:
    """Internal parse result carrying markdown-it tokens; not persisted."""
    path:         Path
    stem:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    frontmatter:  dict[str, Any]
    tokens:       list         # markdown-it Token objects
    env:          dict = field(default_factory=dict)   # markdown-it env (reference definitions)
