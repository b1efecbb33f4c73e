"""
Conduit CLI: the `conduit` command.

Commands:
  conduit auth login              Store endpoint and API token
  conduit call <method> [params]  Call any method with JSON params
  conduit capabilities            Show negotiated server capabilities
  conduit methods                 List methods exposed by the server
"""

from typing import NoReturn

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install conduit-client[cli]")

from conduit_client.cli.config import CliConfig
from conduit_client.client import Connection
from conduit_client.errors import APIError, ConduitError

console = Console()


def _get_connection() -> Connection:
    cfg = CliConfig.resolve()
    if not cfg.logged_in:
        console.print("[red]Not logged in. Run `conduit auth login` first.[/red]")
        raise SystemExit(1)
    return Connection(cfg.endpoint, api_token=cfg.api_token)


def _fail(err: ConduitError) -> NoReturn:
    if isinstance(err, APIError):
        console.print(f"[red]{err.code}[/red]: {err.info or ''}")
    else:
        console.print(f"[red]Error ({err.code}):[/red] {err}")
    raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
def main():
    """Conduit CLI: call Phabricator Conduit methods from the shell."""


# Register subcommands from separate modules
from conduit_client.cli.auth import auth
from conduit_client.cli.call import call_cmd, capabilities_cmd, methods_cmd

main.add_command(auth)
main.add_command(call_cmd)
main.add_command(capabilities_cmd)
main.add_command(methods_cmd)


if __name__ == "__main__":
    main()
