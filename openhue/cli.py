#!/usr/bin/env python3
"""
openhue CLI
Talk to a Philips Hue bridge over its local API.
"""

import click

from openhue import __version__
from openhue.commands.auth import auth_command, discover_command
from openhue.commands.resources import config_command, get_command
from openhue.commands.setup import ColouredGroup, help_command, setup_command
from openhue.core.config import NOT_CONFIGURED_EXIT_CODE, is_exempt
from openhue.core.context import init
from openhue.core.exceptions import ClientError, ConfigurationMissing


@click.group(
    cls=ColouredGroup,
    context_settings={'help_option_names': ['-h', '--help']}
)
@click.version_option(version=__version__, prog_name='openhue')
@click.pass_context
def cli(ctx):
    """openhue - control your Philips Hue bridge from the command line.

Configuration: ~/.openhue/config.yaml (bridge, key)
Run 'setup' for first-time configuration.

Use 'help' for a quick reference of all commands."""
    try:
        ctx.obj = init(ctx.invoked_subcommand)
    except ConfigurationMissing as e:
        click.secho("\nopenhue-cli not configured yet, please run the 'setup' command", fg='red', bold=True)
        if e.detail:
            click.echo(f"Could not read {e.path}: {e.detail}", err=True)
        ctx.exit(NOT_CONFIGURED_EXIT_CODE)
    except ClientError as e:
        # Exempt commands never read ctx.obj
        if is_exempt(ctx.invoked_subcommand):
            return
        raise click.ClickException(str(e)) from e


cli.add_command(help_command)
cli.add_command(setup_command)
cli.add_command(discover_command)
cli.add_command(auth_command)
cli.add_command(get_command)
cli.add_command(config_command)


if __name__ == '__main__':
    cli()
