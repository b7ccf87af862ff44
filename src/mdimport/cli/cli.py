"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdimport.cli.commands import import_cmd


app = typer.Typer(name="mdimport", add_completion=False, help="Markdown import for blog publishing")

app.command(name="import")(import_cmd)
