"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from mdblog.cli.commands import check_cmd, export_cmd, list_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Load, validate and order markdown blog posts")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    ctx.obj = {"verbose": verbose}


app.command(name="list")(list_cmd)
app.command(name="check")(check_cmd)
app.command(name="export")(export_cmd)
