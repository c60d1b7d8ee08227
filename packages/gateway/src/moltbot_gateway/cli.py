"""
CLI for inspecting the container environment mapping.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import APP_NAME, get_default_env_file, snapshot_environ
from .env import build_env_vars, resolve_gateway_target

_APP = typer.Typer(name=APP_NAME, help="Container environment mapping for the moltbot gateway")

console = Console()

_SECRET_SUFFIXES = ("_KEY", "_TOKEN")


def _is_secret(name: str) -> bool:
    return name.endswith(_SECRET_SUFFIXES)


def _mask(value: str) -> str:
    if len(value) <= 8:
        return "****"
    return value[:4] + "****"


def _display_env(env: dict[str, str], reveal: bool) -> dict[str, str]:
    if reveal:
        return dict(env)
    return {k: _mask(v) if _is_secret(k) else v for k, v in env.items()}


@_APP.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log routing decisions"),
) -> None:
    """Container environment mapping for the moltbot gateway."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("moltbot_gateway").setLevel(logging.DEBUG)


@_APP.command("show")
def show_cmd(
    env_file: Optional[str] = typer.Option(None, "--env-file", "-e", help="Load variables from a .env file"),
    isolated: bool = typer.Option(False, "--isolated", help="Ignore the process environment"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
    reveal: bool = typer.Option(False, "--reveal", help="Show secret values unmasked"),
) -> None:
    """Show the environment the container would receive."""
    env_file = env_file or get_default_env_file()
    try:
        snapshot = snapshot_environ(env_file, include_process=not isolated)
    except FileNotFoundError:
        typer.echo(f"Env file not found: {env_file}", err=True)
        raise typer.Exit(1)

    shown = _display_env(build_env_vars(snapshot), reveal)

    if json_out:
        typer.echo(json.dumps(shown, indent=2, sort_keys=True))
        return

    if not shown:
        typer.echo("No container environment variables resolved.")
        return

    table = Table(title="Container Environment")
    table.add_column("Variable")
    table.add_column("Value", overflow="fold")
    for name in sorted(shown):
        table.add_row(name, shown[name])
    console.print(table)


@_APP.command("route")
def route_cmd(
    url: str = typer.Argument(..., help="AI gateway base URL"),
) -> None:
    """Show which provider an AI gateway base URL routes to."""
    route = resolve_gateway_target(url)
    typer.echo(f"Base URL:     {route.base_url}")
    typer.echo(f"Provider tag: {route.provider_tag or '(none)'}")
    if route.target is None:
        typer.echo("Routed keys:  none")
    else:
        typer.echo(f"Routed keys:  {route.target.api_key_var}, {route.target.base_url_var}")


def main() -> None:
    _APP()


if __name__ == "__main__":
    main()
