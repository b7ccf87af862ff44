from mdimport.cli.cli import app

app(prog_name="mdimport")
