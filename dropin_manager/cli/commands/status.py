"""Status command implementation"""

import json
import sys

import click
from rich.console import Console

from ..utils.output import format_status_table, print_error
from ...api import DropinManagerError

console = Console()


@click.command()
@click.option('-n', '--name', 'names', multiple=True,
              help='Deployment name (repeatable, default: all)')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def status(ctx, names, as_json):
    """Show deployment state of configured drop-ins

    Warns when a pending update cannot be written to the drop-in directory.
    """
    try:
        managers = ctx.obj.config_service.build_managers(list(names), notices=ctx.obj.notices)
    except DropinManagerError as e:
        print_error("Failed to load configuration", e)
        sys.exit(1)

    statuses = []
    for name, manager in managers:
        snapshot = manager.status()
        snapshot["name"] = name
        statuses.append(snapshot)

        if snapshot["update_required"] and not snapshot["writable"]:
            manager.notices.warn(manager.dest_dir)

    if as_json:
        click.echo(json.dumps(statuses, indent=2))
        return

    console.print(format_status_table(statuses))
    ctx.obj.notices.render()
