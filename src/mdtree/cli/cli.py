"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtree.cli.commands import convert_cmd, export_cmd, import_cmd, links_cmd


app = typer.Typer(name="mdtree", no_args_is_help=True, help="Markdown <-> document tree conversion and vault import")

app.command(name="convert")(convert_cmd)
app.command(name="links")(links_cmd)
app.command(name="import")(import_cmd)
app.command(name="export")(export_cmd)
