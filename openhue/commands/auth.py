"""Bridge discovery and pairing commands.

Both commands run before the CLI is configured, so they never touch the
application context and build their own unauthenticated client.
"""

import click

from openhue.core.client import DEFAULT_DEVICE_TYPE, new_client_no_auth
from openhue.core.discovery import discover_bridges
from openhue.core.exceptions import BridgeError, ClientError, LinkButtonNotPressed
from openhue.models.types import DiscoveredBridge

MAX_PAIRING_ATTEMPTS = 3


def select_bridge_interactive(bridges: list[DiscoveredBridge]) -> str | None:
    """Let the user pick one of several discovered bridges.

    Returns the chosen bridge's IP, or None if the user quits or the choice
    is not one of the listed numbers.
    """
    if not bridges:
        return None

    click.echo()
    click.secho(f"Found {len(bridges)} Hue bridges:", fg='cyan', bold=True)
    for number, bridge in enumerate(bridges, 1):
        ip = bridge.get('internalipaddress', 'Unknown')
        click.echo(f"  {click.style(str(number), fg='green', bold=True)}. {ip} - ID: {bridge.get('id', 'Unknown')}")
    click.echo()

    choice = click.prompt("Bridge number ('q' to cancel)", type=str, default='1').strip()
    if choice.lower() == 'q':
        return None

    if choice.isdigit() and 1 <= int(choice) <= len(bridges):
        return bridges[int(choice) - 1].get('internalipaddress')

    click.echo(f"Invalid selection: {choice}", err=True)
    return None


def pair_with_bridge(bridge_ip: str, device_type: str = DEFAULT_DEVICE_TYPE) -> str | None:
    """Create an application key via link button authentication.

    Requires the user to press the physical link button on the Hue bridge.
    Retries up to MAX_PAIRING_ATTEMPTS times if the button wasn't pressed.

    Args:
        bridge_ip: Bridge IP address
        device_type: Application identifier (devicetype)

    Returns:
        Application key if successful, None otherwise

    Raises:
        ClientError: If bridge_ip is not a usable address
    """
    client = new_client_no_auth(bridge_ip)

    for attempt in range(1, MAX_PAIRING_ATTEMPTS + 1):
        click.echo()
        click.secho("Press the LINK BUTTON on your Hue Bridge", fg='yellow', bold=True)
        click.secho("You have 30 seconds after pressing the button", fg='yellow')
        click.echo()
        click.pause("Press Enter when ready...")

        click.echo(f"Requesting application key... (attempt {attempt}/{MAX_PAIRING_ATTEMPTS})")

        try:
            key = client.create_application_key(device_type)
        except LinkButtonNotPressed:
            if attempt < MAX_PAIRING_ATTEMPTS:
                click.secho("✗ Link button not pressed. Please try again.", fg='red')
                continue
            click.secho(f"✗ Failed after {MAX_PAIRING_ATTEMPTS} attempts.", fg='red')
            click.echo("Please ensure you press the link button before pressing Enter.")
            return None
        except BridgeError as e:
            click.echo(f"Error: {e}", err=True)
            return None

        click.echo()
        click.secho("✓ Successfully created application key!", fg='green', bold=True)
        return key

    return None


@click.command(name='discover')
def discover_command():
    """Discover Hue bridges on the local network."""
    click.echo("Discovering Hue bridges...")
    bridges = discover_bridges()

    if not bridges:
        click.secho("⚠ No bridges found", fg='yellow')
        return

    for bridge in bridges:
        ip = bridge.get('internalipaddress', 'Unknown')
        click.echo(f"  {click.style(ip, fg='green', bold=True)}  ID: {bridge.get('id', 'Unknown')}")


@click.command(name='auth')
@click.option('-b', '--bridge', required=True, help='Bridge IP address')
@click.option('--devicetype', default=DEFAULT_DEVICE_TYPE, show_default=True,
              help='Application identifier registered on the bridge')
def auth_command(bridge, devicetype):
    """Pair with a bridge and print the new application key.

    The key is not saved; run 'setup' to pair and store it in one go.
    """
    try:
        key = pair_with_bridge(bridge, devicetype)
    except ClientError as e:
        raise click.ClickException(str(e)) from e

    if not key:
        raise click.ClickException("Failed to create an application key")

    click.echo(f"Application key: {click.style(key, fg='green', bold=True)}")
