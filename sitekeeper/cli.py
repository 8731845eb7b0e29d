import asyncio
import sys

import click
from rich.text import Text

from sitekeeper.core.config import Config
from sitekeeper.core.confirmation import AlwaysConfirm
from sitekeeper.core.service import BulkResult
from sitekeeper.core.service import SiteKeeperService
from sitekeeper.errors import SiteKeeperError
from sitekeeper.errors import UsageError
from sitekeeper.helpers.jobs_result import JobResult
from sitekeeper.output.console import CONSOLE
from sitekeeper.output.styles import Style
from sitekeeper.version import get_version

ALL = 'all'

ENVIRONMENT_HELP = """
Usage:  sitekeeper {command} ENVIRONMENT
        sitekeeper {command} all

{title} one or more environments

ENVIRONMENT can be set to either the slug version of the hostname (same as the directory name) or the hostname.
    - docker.test
    - docker-test

When 'all' is specified as the ENVIRONMENT, each environment will {command}
"""


def environment_help(command: str) -> str:
    return ENVIRONMENT_HELP.format(command=command, title=command.capitalize())


def report(result) -> int:
    if isinstance(result, BulkResult):
        for slug in result.failed:
            CONSOLE.print(Text(f' ✗ {slug}', style=Style.bad))
        for slug in result.skipped:
            CONSOLE.print(Text(f' - {slug} skipped', style=Style.warn))
        if result.global_result == JobResult.BAD:
            CONSOLE.print(Text(f' ✗ global services\n{result.global_result!r}', style=Style.bad))
        return 0 if result.ok else 1

    if result is None or result == JobResult.GOOD:
        return 0

    CONSOLE.print(Text(repr(result), style=Style.bad))
    return 1


def execute(command: str, coroutine_factory) -> None:
    try:
        exit_code = report(asyncio.run(coroutine_factory()))
    except UsageError:
        CONSOLE.print(environment_help(command))
        sys.exit(2)
    except SiteKeeperError as e:
        CONSOLE.print(Text(f'ERROR: {e}', style=Style.bad))
        sys.exit(1)
    sys.exit(exit_code)


@click.group()
@click.version_option(get_version(), prog_name='sitekeeper')
@click.pass_context
def main(ctx: click.Context):
    """Start, stop, restart and delete local site environments."""
    ctx.obj = SiteKeeperService(Config())


def _environment_command(command: str, single: str, bulk: str, with_global: bool = False):
    @click.argument('environment', required=False)
    @click.pass_obj
    def handler(service: SiteKeeperService, environment: str | None):
        async def run():
            if not environment:
                raise UsageError('ENVIRONMENT is required')
            if environment != ALL:
                service.registry.resolve(environment)
            if with_global:
                await service.start_global()
            if environment == ALL:
                return await getattr(service, bulk)()
            return await getattr(service, single)(environment)

        execute(command, run)

    handler.__doc__ = f'{command.capitalize()} ENVIRONMENT or all environments.'
    return main.command(name=command)(handler)


start = _environment_command('start', 'start', 'start_all', with_global=True)
stop = _environment_command('stop', 'stop', 'stop_all')
restart = _environment_command('restart', 'restart', 'restart_all')


@main.command()
@click.argument('environment', required=False)
@click.option('--yes', '-y', is_flag=True, help='Delete without asking for confirmation.')
@click.pass_obj
def delete(service: SiteKeeperService, environment: str | None, yes: bool):
    """Delete ENVIRONMENT files and database."""
    if environment == ALL:
        raise click.UsageError("'all' can't be deleted at once, delete environments one by one")

    confirmation = AlwaysConfirm() if yes else None
    execute('delete', lambda: service.delete(environment, confirmation=confirmation))


@main.command(name='global')
@click.argument('action', type=click.Choice(['start', 'stop', 'restart']))
@click.pass_obj
def global_services(service: SiteKeeperService, action: str):
    """Manage the shared network and gateway/database stack."""
    execute(action, getattr(service, f'{action}_global'))


@main.command(name='list')
@click.pass_obj
def list_environments(service: SiteKeeperService):
    """List known environments."""
    environments = service.registry.list_all()
    if not environments:
        CONSOLE.print(Text(f'No environments found in {service.registry.sites_path}', style=Style.warn))
        return
    for environment in environments:
        CONSOLE.print(Text(environment.slug, style=Style.mark_neutral)
                      .append(Text(f'  {environment.path}', style=Style.context)))
