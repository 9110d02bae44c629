"""
Main CLI entry point for the Organization Manager.

This module provides the command-line interface using Click
with Rich formatting for errors.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from org_manager import __version__
from org_manager.cli.apps import resolve_app
from org_manager.client.api import PlatformClient
from org_manager.core.exceptions import OrgManagerError
from org_manager.models.config import ManagerSettings
from org_manager.orchestrator.transfer import (
    USAGE,
    TransferOrchestrator,
    validate_migrate_flags,
    validate_transfer_flags,
)
from org_manager.security.credentials import CredentialManager
from org_manager.utils.logging import get_logger, setup_logging
from org_manager.utils.output import ProgressOutput

console = Console()
logger = get_logger("cli")


def _orchestrator(ctx: click.Context) -> TransferOrchestrator:
    """Build an orchestrator from the settings stored on the context."""
    settings: ManagerSettings = ctx.obj['settings']
    api_key = ctx.obj.get('api_key')
    if not api_key:
        api_key = CredentialManager(settings.api_host).get_api_key()
    client = PlatformClient(settings, api_key, transport=ctx.obj.get('transport'))
    return TransferOrchestrator(client, ProgressOutput(console))


def _fail(error: OrgManagerError) -> None:
    logger.debug(f"{error.code}: {error.details}")
    console.print(f"[red]Error: {escape(error.message)}[/red]", soft_wrap=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool):
    """
    Organization Manager

    Manage apps in organization accounts: transfer single apps to or from an
    organization, or migrate a whole team into one.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    setup_logging(level="DEBUG" if verbose else "WARNING")

    if version:
        console.print(f"Organization Manager version {__version__}")
        sys.exit(0)

    try:
        ctx.obj.setdefault('settings', ManagerSettings.from_env())
    except ValueError as e:
        console.print(f"[red]Error: invalid host configuration: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use --help to see available commands[/yellow]")


@main.command()
def index():
    """Show usage for the transfer command."""
    ProgressOutput(console).line(USAGE)


@main.command()
@click.option('--to', '-t', 'to', metavar='ORG', help='Transfer application from personal account to this org')
@click.option('--from', '-f', 'from_', metavar='ORG', help='Transfer application from this org to personal account')
@click.option('--app', '-a', metavar='APP', help='App to transfer')
@click.option('--remote', '-r', default='heroku', show_default=True, help='Git remote used to find the app')
@click.pass_context
def transfer(ctx: click.Context, to: Optional[str], from_: Optional[str],
             app: Optional[str], remote: str):
    """Transfer an app to or from an organization account."""
    try:
        # Flag errors are reported before the app or credentials are looked up
        validate_transfer_flags(to, from_)
        orchestrator = _orchestrator(ctx)
        orchestrator.transfer(resolve_app(app, remote), to=to, from_=from_)
    except OrgManagerError as e:
        _fail(e)


@main.command()
@click.option('--to', 'to', metavar='ORG', help='Transfer all applications from TEAM to ORG')
@click.option('--from', 'from_', metavar='ORG', help='Not supported; ignored when --to is given')
@click.option('--team', metavar='TEAM', help='Team to transfer applications from')
@click.pass_context
def migrate(ctx: click.Context, to: Optional[str], from_: Optional[str], team: Optional[str]):
    """Move all apps from a team into an organization."""
    try:
        validate_migrate_flags(team, to, from_)
        orchestrator = _orchestrator(ctx)
        orchestrator.migrate(team, to=to, from_=from_)
    except OrgManagerError as e:
        _fail(e)


@main.command()
@click.pass_context
def orgs(ctx: click.Context):
    """List organization accounts that you have access to."""
    try:
        _orchestrator(ctx).orgs()
    except OrgManagerError as e:
        _fail(e)


if __name__ == '__main__':
    main()
