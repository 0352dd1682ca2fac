from __future__ import annotations

import asyncio
from typing import Optional

import orjson
import typer
import uvicorn

from .config import Settings
from .core.service import AlderpersonService
from .errors import AlderpersonError
from .logging import setup_logging

app = typer.Typer(no_args_is_help=True)


def main() -> None:
    app()


@app.command()
def lookup(
    address: str = typer.Argument(..., help="Chicago street address to look up"),
    headful: bool = typer.Option(False, help="Run browser in headed mode"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response"),
) -> None:
    """Find the ward and alderperson for ADDRESS."""

    settings = Settings.from_env()
    if headful:
        settings.headless = False
    settings.ensure_directories()
    setup_logging(settings.log_level, settings.log_dir / "alderperson.log")

    try:
        result = asyncio.run(_lookup(address, settings))
    except AlderpersonError as exc:
        typer.echo(f"Could not find ward/alderperson information: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode())
        return
    typer.echo(f"Ward: {result['ward']}")
    typer.echo(f"Alderperson: {result['alderperson']}")
    typer.echo(f"Contact: {result['contact']}")
    if result.get("wardOffice"):
        typer.echo(f"Ward office: {result['wardOffice']}")
    if result.get("wardPhone"):
        typer.echo(f"Ward phone: {result['wardPhone']}")


async def _lookup(address: str, settings: Settings) -> dict:
    service = AlderpersonService(settings)
    try:
        response = await service.lookup(address)
    finally:
        await service.close()
    return response.model_dump(by_alias=True)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind (defaults to HOST)"),
    port: Optional[int] = typer.Option(None, help="Port to listen on (defaults to PORT)"),
) -> None:
    """Run the HTTP API."""

    settings = Settings.from_env()
    uvicorn.run(
        "alderperson.server.app:app",
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )
