from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from fleet.datastore import (
    DataStoreError,
    DataStoreKeyNotFoundError,
    FileDataStore,
    ReadOptions,
    WriteOptions,
    create_datastore,
)
from fleet.settings import settings

KeyArgument = Annotated[str, typer.Argument(help="Store key, e.g. 'token' or 'keys/device'.")]
EncodingOption = Annotated[
    str,
    typer.Option("--encoding", "-e", show_default=True, help="Text encoding of the value."),
]
RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        envvar="FLEET_DATASTORE__ROOT",
        help="Override the directory the store keeps its files in.",
    ),
]

app = typer.Typer(help="Inspect and edit Fleet local state.")


@app.callback(invoke_without_command=True)
def _store_root(ctx: typer.Context, root: RootOption = None) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    ctx.obj = create_datastore(settings.to_datastore_settings(root=root))


@app.command("get")
def get(
    ctx: typer.Context,
    key: KeyArgument,
    encoding: EncodingOption = "utf-8",
    raw: Annotated[bool, typer.Option("--raw", help="Write raw bytes without decoding.")] = False,
) -> None:
    store: FileDataStore = ctx.obj
    options = ReadOptions(encoding=None if raw else encoding)
    result = asyncio.run(store.get(key, options))
    if result.is_err():
        _fail(result.err_value)

    value = result.ok_value
    typer.echo(value, nl=not raw)


@app.command("set")
def set_(
    ctx: typer.Context,
    key: KeyArgument,
    value: Annotated[str, typer.Argument(help="Value to store.")],
    encoding: EncodingOption = "utf-8",
    mode: Annotated[
        str | None,
        typer.Option("--mode", help="Octal permission bits for the stored file, e.g. 600."),
    ] = None,
    atomic: Annotated[bool, typer.Option("--atomic", help="Replace the file atomically.")] = False,
) -> None:
    store: FileDataStore = ctx.obj
    options = WriteOptions(encoding=encoding, mode=_parse_mode(mode), atomic=atomic)
    result = asyncio.run(store.set(key, value, options))
    if result.is_err():
        _fail(result.err_value)

    typer.echo(f"Saved {key}")


@app.command("has")
def has(ctx: typer.Context, key: KeyArgument) -> None:
    store: FileDataStore = ctx.obj
    result = asyncio.run(store.has(key))
    if result.is_err():
        _fail(result.err_value)

    present = result.ok_value
    typer.echo("true" if present else "false")
    if not present:
        raise typer.Exit(code=1)


@app.command("rm")
def remove(ctx: typer.Context, key: KeyArgument) -> None:
    store: FileDataStore = ctx.obj
    result = asyncio.run(store.remove(key))
    if result.is_err():
        _fail(result.err_value)

    typer.echo(f"Removed {key}")


def _parse_mode(mode: str | None) -> int | None:
    if mode is None:
        return None
    try:
        value = int(mode, 8)
    except ValueError:
        raise typer.BadParameter(f"'{mode}' is not an octal permission value", param_hint="--mode") from None
    if not 0 <= value <= 0o7777:
        raise typer.BadParameter(f"'{mode}' is outside the permission range 0-7777", param_hint="--mode")
    return value


def _fail(error: DataStoreError) -> None:
    message = error.message
    error_path = getattr(error, "path", None)
    if error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1 if isinstance(error, DataStoreKeyNotFoundError) else 2)
