"""Commands that read from the configured bridge.

These are the commands that need config.yaml; they receive the shared
client through the application context.
"""

import json

import click

from openhue.core.config import get_config_file
from openhue.core.context import AppContext, pass_app
from openhue.core.exceptions import BridgeError
from openhue.models.utils import mask_key


@click.command(name='get')
@click.argument('resource_type')
@click.option('--json', 'as_json', is_flag=True, help='Print the raw JSON returned by the bridge')
@pass_app
def get_command(app: AppContext, resource_type, as_json):
    """List bridge resources of RESOURCE_TYPE (light, room, scene, ...)."""
    try:
        resources = app.client.get_resources(resource_type)
    except BridgeError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(resources, indent=2))
        return

    if not resources:
        click.echo(f"No {resource_type} resources found.")
        return

    for resource in resources:
        name = (resource.get('metadata') or {}).get('name', '')
        click.echo(f"{click.style(resource.get('id', ''), fg='green')}  {name}")


@click.command(name='config')
@pass_app
def config_command(app: AppContext):
    """Show the loaded configuration."""
    click.echo(f"Config file:  {get_config_file()}")
    click.echo(f"Bridge:       {app.settings.bridge or '(not set)'}")
    click.echo(f"Key:          {mask_key(app.settings.key)}")
    click.echo(f"Base URL:     {app.client.base_url}")
