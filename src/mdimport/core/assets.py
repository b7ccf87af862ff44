"""Image reference relocation into the per-document assets directory"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Iterator

import mdurl

from mdimport.core.frontmatter import asset_name, asset_url, resolve_asset
from mdimport.core.models import AssetCopy


logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ('http://', 'https://', 'data:')


def iter_images(tokens: list) -> Iterator:
    """Yield every image token in document order, descending into inline children."""
    for tok in tokens:
        if tok.type == 'image':
            yield tok
        if tok.children:
            yield from iter_images(tok.children)


def relocate_images(
    tokens: list,
    stem: str,
    images_root: Path,
    assets_dir: Path,
    dirname: str = "assets",
    ) -> list[AssetCopy]:
    """Rewrite image URLs to ./<dirname>/<stem>/<name> and return the copies that back them.

    URLs are rewritten immediately; the copies are only planned here.
    Reference-style images lose their label so the new URL is emitted inline.
    """
    copies = []
    for tok in iter_images(tokens):
        src = tok.attrs.get('src', '')
        if not src or src.startswith(REMOTE_PREFIXES):
            continue
        # markdown-it stores a percent-encoded src; files on disk use the decoded name
        src = mdurl.decode(src)
        name = asset_name(src)
        copies.append(AssetCopy(source=resolve_asset(src, images_root), target=assets_dir / name))
        tok.attrs["src"] = asset_url(stem, name, dirname)
        tok.meta.pop('label', None)
    return copies


async def copy_asset(copy: AssetCopy) -> Path:
    """Copy a single asset; raises OSError on failure."""
    copy.target.parent.mkdir(parents=True, exist_ok=True)
    await asyncio.to_thread(shutil.copy2, copy.source, copy.target)
    return copy.target


async def copy_all(copies: list[AssetCopy]) -> tuple[list[Path], list[str]]:
    """Run every copy concurrently and wait for all of them.

    Failures are logged and returned as messages; they never abort the import.
    """
    results = await asyncio.gather(*(copy_asset(c) for c in copies), return_exceptions=True)
    copied, failures = [], []
    for copy, result in zip(copies, results):
        if isinstance(result, BaseException):
            msg = f"Failed to copy {copy.source} -> {copy.target}: {result}"
            logger.error(msg)
            failures.append(msg)
        else:
            copied.append(result)
    return copied, failures
