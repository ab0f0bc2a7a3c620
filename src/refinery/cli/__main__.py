from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..core.config import Config
from ..core.errors import ConfigError
from ..core.formatting import OutputMode
from ..core.types import LoadOptions
from ..loader import load_config

app = typer.Typer(help="Refine layered configuration into flat options or arguments")

DEFAULT_NAME = "config.toml"


def _config(ctx: typer.Context) -> Config:
    options: LoadOptions = ctx.obj
    try:
        return load_config(options)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    name: str = typer.Option(DEFAULT_NAME, "--name", envvar="REFINERY_NAME", help="Base file name to search for"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", envvar="REFINERY_CONFIG", help="Explicit configuration file"),
    location: Optional[List[Path]] = typer.Option(None, "--location", "-l", help="Extra directory to search"),
    merge: bool = typer.Option(False, "--merge", help="Merge every file found"),
    allow_empty: bool = typer.Option(False, "--allow-empty", help="Accept a configuration with no entries"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = LoadOptions(
        name=name,
        path=config,
        locations=tuple(location or ()),
        merge=merge,
        die_on_empty=not allow_empty,
    )


@app.command()
def refine(
    ctx: typer.Context,
    keys: Optional[List[str]] = typer.Argument(None, help="Key path, outermost first"),
    filter: bool = typer.Option(False, "--filter", help="Drop false and undefined values"),
):
    cfg = _config(ctx)
    flat = cfg.refine(keys or (), filter=filter)
    typer.echo(json.dumps(flat, indent=2, default=str))


@app.command()
def args(
    ctx: typer.Context,
    keys: Optional[List[str]] = typer.Argument(None, help="Key path, outermost first"),
    mode: str = typer.Option(OutputMode.UNIX_T1.value, "--mode", "-m", help="uri-t1, uri-t2, unix-t1 or unix-t3"),
    glue: str = typer.Option(",", "--glue", help="Separator for array elements"),
    filter: bool = typer.Option(False, "--filter", help="Drop false and undefined values"),
    sep: str = typer.Option("\n", "--sep", help="Separator between formatted entries"),
):
    try:
        output_mode = OutputMode.parse(mode)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--mode")
    cfg = _config(ctx)
    typer.echo(sep.join(cfg.refine_str(keys or (), mode=output_mode, glue=glue, filter=filter)))


@app.command()
def show(
    ctx: typer.Context,
    format: str = typer.Option("json", "--format", "-f", help="json or yaml"),
):
    cfg = _config(ctx)
    try:
        typer.echo(cfg.dumps(format).rstrip("\n"))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format")


if __name__ == "__main__":
    app()
