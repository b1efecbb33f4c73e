"""CLI: conduit call|capabilities|methods"""

import json
import sys
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.table import Table

from conduit_client.errors import ConduitError

console = Console()


def _get_connection():
    from conduit_client.cli.main import _get_connection
    return _get_connection()


def _fail(err: ConduitError) -> NoReturn:
    from conduit_client.cli.main import _fail
    _fail(err)


def _to_jsonable(value):
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


@click.command("call")
@click.argument("method")
@click.argument("params", required=False)
def call_cmd(method: str, params: Optional[str]):
    """Call METHOD with PARAMS (JSON object; read from stdin when omitted)."""
    raw = params if params is not None else sys.stdin.read()
    try:
        parsed = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"params is not valid JSON: {e}")
    if not isinstance(parsed, dict):
        raise click.BadParameter("params must be a JSON object")

    try:
        with _get_connection() as conn:
            result = conn.call(method, parsed)
    except ConduitError as e:
        _fail(e)
    click.echo(json.dumps(_to_jsonable(result), indent=2, default=str))


@click.command("capabilities")
@click.option("--json-output", "--json", is_flag=True)
def capabilities_cmd(json_output):
    """Show the server's supported auth schemes and formats."""
    try:
        with _get_connection() as conn:
            caps = conn.conduit.get_capabilities()
    except ConduitError as e:
        _fail(e)
    if json_output:
        click.echo(json.dumps(_to_jsonable(caps), indent=2))
        return
    table = Table(title="Capabilities")
    table.add_column("Capability", style="bold")
    table.add_column("Values")
    table.add_row("authentication", ", ".join(caps.authentication))
    table.add_row("signatures", ", ".join(caps.signatures))
    table.add_row("input", ", ".join(caps.input))
    table.add_row("output", ", ".join(caps.output))
    if caps.version is not None:
        table.add_row("version", str(caps.version))
    console.print(table)


@click.command("methods")
@click.option("--filter", "name_filter", default=None, help="Only methods containing this text")
def methods_cmd(name_filter):
    """List methods exposed by the server (conduit.query)."""
    try:
        with _get_connection() as conn:
            with console.status("Fetching methods..."):
                methods = conn.conduit.query()
    except ConduitError as e:
        _fail(e)
    table = Table(title=f"Methods ({len(methods)} total)")
    table.add_column("Method", style="bold")
    table.add_column("Returns")
    table.add_column("Description")
    for name in sorted(methods):
        if name_filter and name_filter not in name:
            continue
        info = methods[name]
        table.add_row(name, info.returns, info.description)
    console.print(table)
