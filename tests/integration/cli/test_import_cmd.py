"""Integration tests for the import command"""

from typer.testing import CliRunner

from mdimport.cli.cli import app


runner = CliRunner()


def _setup(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    (images / "a.png").write_bytes(b"a")
    md = tmp_path / "hello.md"
    md.write_text("---\ntitle: Hello\ntags: [x, y]\n---\n\n# Hello\n\n![a](/a.png)\n", encoding="utf-8")
    return images, md


def test_import_cmd_converts_file(tmp_path, fake_render):
    """import writes posts/<stem>.md and copies the referenced image."""
    images, md = _setup(tmp_path)
    result = runner.invoke(app, [str(images), str(md)])

    assert result.exit_code == 0, result.output
    assert "Import complete" in result.output
    out = (tmp_path / "posts" / "hello.md").read_text(encoding="utf-8")
    assert "tags: x, y" in out
    assert (tmp_path / "posts" / "assets" / "hello" / "a.png").exists()


def test_import_cmd_posts_dir_option(tmp_path, fake_render):
    images, md = _setup(tmp_path)
    result = runner.invoke(app, [str(images), str(md), "--posts-dir", str(tmp_path / "site")])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "site" / "hello.md").exists()


def test_import_cmd_reports_warnings(tmp_path, fake_render):
    """Missing images are reported as warnings without failing the command."""
    images, md = _setup(tmp_path)
    (images / "a.png").unlink()
    result = runner.invoke(app, [str(images), str(md)])
    assert result.exit_code == 0, result.output
    assert "Warning: Failed to copy" in result.output
    assert "1 warning(s)" in result.output


def test_import_cmd_missing_arguments(tmp_path):
    """Missing positional arguments print usage and exit non-zero."""
    result = runner.invoke(app, [str(tmp_path)])
    assert result.exit_code != 0
    assert "Usage" in result.output


def test_import_cmd_no_arguments():
    result = runner.invoke(app, [])
    assert result.exit_code != 0


def test_import_cmd_invalid_frontmatter(tmp_path):
    """Malformed front matter is fatal: error on stderr and exit 1."""
    md = tmp_path / "bad.md"
    md.write_text("---\ntitle: [oops\n---\nBody\n", encoding="utf-8")
    result = runner.invoke(app, [str(tmp_path), str(md)])
    assert result.exit_code == 1
    assert "Error: Cannot parse" in result.output


def test_import_cmd_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "IMAGES_ROOT" in result.output
