"""Diagram fence rasterization and replacement with image paragraphs"""

import asyncio
import logging
from pathlib import Path

from markdown_it.token import Token

from mdimport.config import Settings
from mdimport.core.frontmatter import asset_url
from mdimport.core.models import DiagramJob
from mdimport.core.render import render_diagram


logger = logging.getLogger(__name__)

ALT_PREFIX = "Mermaid diagram"


def _fence_lang(token) -> str:
    """First word of a fence info string ('mermaid title=x' -> 'mermaid')."""
    words = token.info.strip().split(maxsplit=1)
    return words[0] if words else ""


def find_diagrams(tokens: list, lang: str) -> list[DiagramJob]:
    """Collect diagram fences in source order, numbered from zero."""
    jobs: list[DiagramJob] = []
    for i, tok in enumerate(tokens):
        if tok.type == 'fence' and _fence_lang(tok) == lang:
            jobs.append(DiagramJob(index=len(jobs), token_index=i, source=tok.content))
    return jobs


def image_paragraph(fence, url: str, alt: str) -> list:
    """paragraph_open / inline[image] / paragraph_close replacing a fence token."""
    image = Token(
        "image", "img", 0,
        attrs={"src": url, "alt": ""},
        content=alt,
        children=[Token("text", "", 0, content=alt)],
    )
    return [
        Token("paragraph_open", "p", 1, map=fence.map, level=fence.level, block=True),
        Token("inline", "", 0, map=fence.map, level=fence.level + 1, content=f"![{alt}]({url})",
              block=True, children=[image]),
        Token("paragraph_close", "p", -1, level=fence.level, block=True),
    ]


async def rasterize(job: DiagramJob, assets_dir: Path, settings: Settings) -> DiagramJob:
    """Write the sidecar source, render it to PNG, then remove the sidecar."""
    sidecar = assets_dir / f"temp-{job.name}.mmd"
    output = assets_dir / job.name
    await asyncio.to_thread(sidecar.write_text, job.source, encoding="utf-8")
    try:
        await render_diagram(sidecar, output, settings)
    finally:
        try:
            sidecar.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to remove %s: %s", sidecar, e)
    return job


async def rasterize_all(
    tokens: list,
    stem: str,
    assets_dir: Path,
    settings: Settings,
    ) -> tuple[list[str], list[str]]:
    """Render every diagram concurrently, then splice in images for the ones that succeeded.

    All renders are started before any is awaited. Replacements are applied
    back to front after every render has settled so recorded token indices
    stay valid; failed diagrams keep their code block.
    Returns (rendered names in source order, failure messages).
    """
    jobs = find_diagrams(tokens, settings.diagram_lang)
    results = await asyncio.gather(
        *(rasterize(job, assets_dir, settings) for job in jobs),
        return_exceptions=True,
    )

    rendered: list[DiagramJob] = []
    failures: list[str] = []
    for job, result in zip(jobs, results):
        if isinstance(result, BaseException):
            msg = f"Failed to render {job.name}: {result}"
            logger.error(msg)
            failures.append(msg)
        else:
            rendered.append(job)

    for job in reversed(rendered):
        fence = tokens[job.token_index]
        url = asset_url(stem, job.name, settings.assets_dirname)
        tokens[job.token_index:job.token_index + 1] = image_paragraph(fence, url, f"{ALT_PREFIX} {job.name}")

    return [job.name for job in rendered], failures
