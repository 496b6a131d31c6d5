"""Check, install, remove and (de)activate commands"""

import json
import sys
from typing import Callable, List, Tuple

import click

from ..utils.output import format_operation_result, print_error, print_warning
from ...api import DropinManager, DropinManagerError, TeardownError, on_activate, on_deactivate
from ...models import OperationResult

name_option = click.option(
    '-n', '--name', 'names', multiple=True,
    help='Deployment name (repeatable, default: all)'
)
json_option = click.option('--json', 'as_json', is_flag=True, help='Output results as JSON')


def _load_managers(ctx, names) -> List[Tuple[str, DropinManager]]:
    try:
        managers = ctx.obj.config_service.build_managers(list(names), notices=ctx.obj.notices)
    except DropinManagerError as e:
        print_error("Failed to load configuration", e)
        sys.exit(1)

    if not managers:
        print_warning("No deployments configured")
    return managers


def _run(ctx, names, operation: str, action: Callable[[DropinManager], OperationResult],
         as_json: bool = False, logs_failures: bool = False) -> None:
    """Run an action for each selected deployment and exit 1 on any failure

    ``logs_failures`` marks actions (the lifecycle hooks) that already wrote
    their failures to the debug log, so only a notice is queued for them.
    """
    failed = 0
    records = []

    for name, manager in _load_managers(ctx, names):
        try:
            result = action(manager)
        except TeardownError as e:
            failed += 1
            if as_json:
                records.append({
                    "name": name,
                    "operation": operation,
                    "status": "failed",
                    "error_code": e.error_code,
                    "message": str(e),
                })
            else:
                print_error(f"{operation.capitalize()} aborted for '{name}'", e)
            continue

        if as_json:
            records.append({"name": name, "operation": operation, **result.to_dict()})
        else:
            format_operation_result(name, operation, result)

        if result.is_failed:
            failed += 1
            if logs_failures:
                manager.notices.warn(manager.dest_dir, result.message)
            else:
                manager.notices.report(result, manager.dest_dir)

    if as_json:
        click.echo(json.dumps(records, indent=2))
    else:
        ctx.obj.notices.render()

    if failed:
        sys.exit(1)


@click.command()
@name_option
@json_option
@click.pass_context
def check(ctx, names, as_json):
    """Install or update drop-ins that are missing or outdated

    Does nothing for drop-ins that are present at the current version.

    Examples:

        # Check every configured drop-in
        dropin-manager check

        # Check one drop-in
        dropin-manager check --name example
    """
    _run(ctx, names, "check", lambda manager: manager.check(), as_json)


@click.command()
@name_option
@json_option
@click.pass_context
def install(ctx, names, as_json):
    """Copy drop-ins into place unconditionally"""
    _run(ctx, names, "install", lambda manager: manager.install(), as_json)


@click.command()
@name_option
@json_option
@click.pass_context
def remove(ctx, names, as_json):
    """Delete drop-ins and clear their recorded versions"""
    _run(ctx, names, "remove", lambda manager: manager.remove(), as_json)


@click.command()
@name_option
@json_option
@click.pass_context
def activate(ctx, names, as_json):
    """Run the activation hook (install, logging failures)"""
    _run(ctx, names, "activate", on_activate, as_json, logs_failures=True)


@click.command()
@name_option
@json_option
@click.pass_context
def deactivate(ctx, names, as_json):
    """Run the deactivation hook

    Drop-ins configured with strict_on_teardown abort with an error when
    the file cannot be removed.
    """
    _run(ctx, names, "deactivate", on_deactivate, as_json, logs_failures=True)
