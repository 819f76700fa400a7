"""Per-run application context.

The CLI builds one AppContext before any command runs and stores it on the
click context, so commands receive the client explicitly instead of reaching
for a module-level global.
"""

from dataclasses import dataclass

import click

from openhue.core.client import HueClient, new_client
from openhue.core.config import Settings, load_settings


@dataclass(frozen=True)
class AppContext:
    """Settings and client shared by all commands of one CLI run."""
    settings: Settings
    client: HueClient


def init(command: str | None) -> AppContext:
    """Load settings for a command and build the authenticated client.

    Raises:
        ConfigurationMissing: If the command needs a config that isn't there
        ClientError: If the client can't be constructed
    """
    settings = load_settings(command)
    return AppContext(settings=settings, client=new_client(settings))


pass_app = click.make_pass_decorator(AppContext)
