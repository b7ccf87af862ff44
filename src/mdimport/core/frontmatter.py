"""Front matter rewrite into the publishing platform schema"""

import posixpath
from pathlib import Path
from typing import Any, Optional

from mdimport.config import Settings
from mdimport.core.models import AssetCopy, FrontMatter


def resolve_asset(url: str, images_root: Path) -> Path:
    """Resolve an asset reference: '/x/y.png' is rooted at images_root, relative paths are joined as-is."""
    return images_root / url.lstrip('/')


def asset_url(stem: str, name: str, dirname: str = "assets") -> str:
    """Relative URL of an asset as seen from the output document."""
    return f"./{dirname}/{stem}/{name}"


def asset_name(url: str) -> str:
    """Basename of a reference path (POSIX or Windows separators)."""
    return posixpath.basename(url.replace('\\', '/'))


def _cover_src(fm: dict[str, Any]) -> Optional[str]:
    """Return image.src when it is a non-empty string, else None."""
    image = fm.get('image')
    src = image.get('src') if isinstance(image, dict) else None
    return src if isinstance(src, str) and src else None


def _join_tags(tags: Any) -> str:
    if not tags:
        return ""
    if isinstance(tags, str):
        return tags
    return ", ".join(str(t) for t in tags)


def transform_frontmatter(
    fm: dict[str, Any],
    stem: str,
    images_root: Path,
    assets_dir: Path,
    settings: Settings,
    ) -> tuple[FrontMatter, Optional[AssetCopy]]:
    """Map source front matter to the output schema and plan the cover image copy.

    Without a usable image.src no copy is planned and cover_image keeps an
    empty basename (./assets/<stem>/).
    """
    cover: Optional[AssetCopy] = None
    name = ""
    if src := _cover_src(fm):
        name = asset_name(src)
        cover = AssetCopy(source=resolve_asset(src, images_root), target=assets_dir / name)

    out = FrontMatter(
        title=str(fm.get('title') or settings.default_title),
        published=False,
        description=str(fm.get('snippet') or settings.default_description),
        tags=_join_tags(fm.get('tags')),
        cover_image=asset_url(stem, name, settings.assets_dirname),
    )
    return out, cover
