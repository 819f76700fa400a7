"""
Setup and help commands for the openhue CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

from dataclasses import dataclass

import click

from openhue.commands.auth import pair_with_bridge, select_bridge_interactive
from openhue.core.client import DEFAULT_DEVICE_TYPE
from openhue.core.config import Settings, save_settings
from openhue.core.discovery import discover_bridges
from openhue.core.exceptions import ClientError
from openhue.models.utils import similarity_score


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx) from e
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []

        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_name, command)
                if score > 0:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=500)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(cmd[0]) for cmd in commands), 12)

            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


COMMAND_SECTIONS = [
    CommandSection(
        name="GETTING STARTED",
        commands=[
            ("setup", "Discover a bridge, pair with it and save the config"),
            ("setup -b <ip>", "Pair with a known bridge and save the config"),
            ("discover", "List bridges on the local network"),
            ("auth -b <ip>", "Pair with a bridge and print the application key"),
        ]
    ),
    CommandSection(
        name="BRIDGE",
        commands=[
            ("config", "Show the loaded configuration"),
            ("get <type>", "List resources of a type (light, room, scene, ...)"),
            ("get <type> --json", "Print resources as raw JSON"),
        ]
    ),
]


@click.command(name='help')
@click.argument('command', required=False)
@click.pass_context
def help_command(ctx, command):
    """Display help and common commands, or the full help of COMMAND."""
    if command:
        group = ctx.parent.command if ctx.parent else None
        subcommand = group.get_command(ctx.parent, command) if isinstance(group, click.Group) else None
        if subcommand is None:
            raise click.UsageError(f"No such command '{command}'.", ctx)
        with click.Context(subcommand, info_name=command, parent=ctx.parent) as sub_ctx:
            click.echo(subcommand.get_help(sub_ctx))
        return

    click.echo()
    click.secho("openhue - Quick Reference", fg='cyan', bold=True)
    click.echo()

    for section in COMMAND_SECTIONS:
        click.secho(section.name, fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (24 - len(cmd)) + "  " + desc)
        click.echo()

    click.secho("For detailed help on any command:", fg='cyan')
    click.echo(f"  openhue {click.style('<command> -h', fg='white', bold=True)}")
    click.echo()


def _choose_bridge() -> str | None:
    click.echo("Step 1: Discovering Hue bridges...")
    bridges = discover_bridges()

    if len(bridges) > 1:
        return select_bridge_interactive(bridges)

    bridge_ip = bridges[0].get('internalipaddress') if bridges else None
    if bridge_ip:
        click.secho(f"✓ Found 1 bridge: {bridge_ip}", fg='green')
        return bridge_ip

    click.echo()
    if click.confirm("Enter bridge IP manually?", default=True):
        return click.prompt("Bridge IP address", type=str)
    return None


@click.command(name='setup')
@click.option('-b', '--bridge', help='Bridge IP address (skips discovery)')
@click.option('--devicetype', default=DEFAULT_DEVICE_TYPE, show_default=True,
              help='Application identifier registered on the bridge')
def setup_command(bridge, devicetype):
    """Configure openhue for a bridge.

    Finds the bridge (or uses --bridge), creates an application key via the
    link button and writes both to ~/.openhue/config.yaml.
    """
    click.echo()
    click.secho("=== openhue setup ===", fg='cyan', bold=True)
    click.echo()

    if not bridge:
        bridge = _choose_bridge()
        if not bridge:
            click.echo("Setup cancelled.")
            return

    click.echo()
    click.echo(f"Step 2: Pairing with bridge at {bridge}...")

    try:
        key = pair_with_bridge(bridge, devicetype)
    except ClientError as e:
        raise click.ClickException(str(e)) from e

    if not key:
        raise click.ClickException("Failed to create an application key")

    click.echo()
    click.echo("Step 3: Saving configuration...")
    try:
        path = save_settings(Settings(bridge=bridge, key=key))
    except OSError as e:
        raise click.ClickException(f"Failed to save configuration: {e}") from e

    click.secho(f"✓ Configuration saved to {path}", fg='green', bold=True)
    click.echo()
