"""Bridge discovery via the Philips N-UPnP service."""

import click
import requests

from openhue.models.types import DiscoveredBridge

DISCOVERY_URL = 'https://discovery.meethue.com/'


def discover_bridges() -> list[DiscoveredBridge]:
    """Ask the Philips discovery service which bridges share our network.

    Returns bridges ordered by IP address. Any failure is reported on the
    terminal and yields an empty list.
    """
    try:
        response = requests.get(DISCOVERY_URL, timeout=5)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            click.secho("⚠ Philips discovery service rate limit reached", fg='yellow')
            click.echo("Philips limits discovery requests; try again later or pass --bridge.")
        else:
            click.echo(f"Bridge discovery failed: {e}", err=True)
        return []
    except requests.exceptions.RequestException as e:
        click.echo(f"Bridge discovery failed: {e}", err=True)
        return []

    try:
        bridges = response.json()
        return sorted(bridges, key=lambda b: b.get('internalipaddress', ''))
    except (ValueError, AttributeError, TypeError) as e:
        click.echo(f"Failed to parse discovery response: {e}", err=True)
        return []
