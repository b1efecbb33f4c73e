"""CLI: conduit auth login|status|logout"""

from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.table import Table

from conduit_client.cli import config as cli_config
from conduit_client.cli.config import CliConfig
from conduit_client.errors import ConduitError

console = Console()


def _fail(err: ConduitError) -> NoReturn:
    from conduit_client.cli.main import _fail
    _fail(err)


def _mask(token: str) -> str:
    return f"{token[:8]}..." if len(token) > 12 else "***"


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--endpoint", default=None, help="Phabricator base URL, e.g. https://phab.example.com")
def auth_login(endpoint: Optional[str]):
    """Verify an API token with user.whoami and save it."""
    from conduit_client.cli import main as cli_main

    saved = CliConfig.load()
    url = endpoint or saved.endpoint or click.prompt("Endpoint")
    token = click.prompt("API token", hide_input=True)

    try:
        with console.status(f"Checking token against {url}..."):
            with cli_main.Connection(url, api_token=token) as conn:
                me = conn.user.whoami()
    except ConduitError as e:
        _fail(e)

    CliConfig(endpoint=url, api_token=token, user_name=me.user_name).save()
    console.print(f"[green]Authenticated as {me.user_name}[/green] [dim]{me.phid}[/dim]")
    console.print(f"[dim]Credentials written to {cli_config.CONFIG_FILE}[/dim]")


@auth.command("status")
def auth_status():
    """Show which endpoint and token the CLI will use."""
    cfg = CliConfig.resolve()
    if not cfg.logged_in:
        console.print("[yellow]No credentials. Run `conduit auth login` or set CONDUIT_API_TOKEN.[/yellow]")
        return
    table = Table(show_header=False)
    table.add_row("endpoint", cfg.endpoint)
    table.add_row("user", cfg.user_name or "?")
    table.add_row("token", _mask(cfg.api_token or ""))
    table.add_row("source", cfg.source)
    console.print(table)


@auth.command("logout")
def auth_logout():
    """Delete the saved credentials file."""
    if CliConfig.clear():
        console.print("[green]Saved credentials removed.[/green]")
    else:
        console.print("[dim]No saved credentials.[/dim]")
