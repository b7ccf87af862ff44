"""Import pipeline: parse -> front matter -> images -> diagrams -> write"""

import asyncio
import logging
from pathlib import Path

from mdimport.config import Settings
from mdimport.core.assets import copy_all, relocate_images
from mdimport.core.diagrams import rasterize_all
from mdimport.core.export import build_markdown, render_body, write_doc
from mdimport.core.frontmatter import transform_frontmatter
from mdimport.core.models import ImportResult
from mdimport.core.parse import make_parser, parse_file


logger = logging.getLogger(__name__)


async def run_import(images_root: Path, path: Path, settings: Settings) -> ImportResult:
    """Convert one markdown file into <posts_dir>/<stem>.md plus its assets directory.

    Parse errors propagate (fatal). Copy and render failures are logged and
    collected in ImportResult.failures. Every copy is awaited before the
    output document is written.
    """
    mdit = make_parser(settings)
    doc = parse_file(path, mdit)

    posts_dir = Path(settings.posts_dir)
    assets_dir = posts_dir / settings.assets_dirname / doc.stem
    assets_dir.mkdir(parents=True, exist_ok=True)

    frontmatter, cover = transform_frontmatter(doc.frontmatter, doc.stem, images_root, assets_dir, settings)
    copies = [cover] if cover else []
    copies += relocate_images(doc.tokens, doc.stem, images_root, assets_dir, settings.assets_dirname)
    copies = list({c.target: c for c in copies}.values())
    logger.debug("%s: %d asset(s) to copy", path, len(copies))

    copy_task = asyncio.ensure_future(copy_all(copies))
    diagrams, render_failures = await rasterize_all(doc.tokens, doc.stem, assets_dir, settings)
    copied, copy_failures = await copy_task

    body = render_body(mdit, doc.tokens, doc.env)
    out = write_doc(build_markdown(frontmatter, body), posts_dir, doc.stem)
    logger.info("Wrote %s (%d asset(s), %d diagram(s))", out, len(copied), len(diagrams))

    return ImportResult(
        output_path=out,
        frontmatter=frontmatter,
        copied=copied,
        diagrams=diagrams,
        failures=copy_failures + render_failures,
    )


def import_file(images_root: Path, path: Path, settings: Settings) -> ImportResult:
    """Synchronous entry point around run_import."""
    return asyncio.run(run_import(images_root, path, settings))
