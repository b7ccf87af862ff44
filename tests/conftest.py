"""Root test configuration: isolated working directory and a fake diagram renderer"""

import pytest


PNG_BYTES = b"\x89PNG\r\n\x1a\n"


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so ./posts and config.yaml are isolated."""
    monkeypatch.chdir(tmp_path)
    for name in ("POSTS_DIR", "ASSETS_DIRNAME", "DIAGRAM_LANG", "RENDERER", "RENDER_TIMEOUT", "BULLET", "FENCE"):
        monkeypatch.delenv(f"MDIMPORT_{name}", raising=False)


@pytest.fixture(name="fake_render")
def fake_render_fixture(monkeypatch):
    """Replace the external renderer with one that writes a stub PNG; records rendered sources."""
    calls = []

    async def _render(source_file, output_file, settings):
        calls.append(source_file.read_text(encoding="utf-8"))
        output_file.write_bytes(PNG_BYTES)
        return output_file

    monkeypatch.setattr("mdimport.core.diagrams.render_diagram", _render)
    return calls
