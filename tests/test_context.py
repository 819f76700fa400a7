"""Tests for the per-run application context in openhue/core/context.py"""

import pytest

from openhue.core.client import HueClient
from openhue.core.config import Settings
from openhue.core.context import AppContext, init
from openhue.core.exceptions import ClientError, ConfigurationMissing


class TestInit:
    """Test settings loading plus client construction."""

    def test_builds_authenticated_client(self, write_config):
        write_config('bridge: "192.168.1.2"\nkey: "xyz"\n')

        app = init('get')

        assert isinstance(app, AppContext)
        assert app.settings == Settings(bridge='192.168.1.2', key='xyz')
        assert isinstance(app.client, HueClient)
        assert app.client.base_url == 'https://192.168.1.2'
        assert app.client.authenticated

    def test_missing_config_for_non_exempt_command(self, config_dir):
        with pytest.raises(ConfigurationMissing):
            init('get')

    def test_missing_config_for_exempt_command(self, config_dir):
        app = init('setup')
        assert app.settings == Settings()

    def test_bad_bridge(self, write_config):
        write_config('bridge: "192.168.1.2/clip"\nkey: "xyz"\n')

        with pytest.raises(ClientError):
            init('get')

    def test_context_is_immutable(self, write_config):
        write_config('bridge: h\nkey: k\n')
        app = init('get')

        with pytest.raises(AttributeError):
            app.client = None
