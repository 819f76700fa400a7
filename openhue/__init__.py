"""openhue - command-line control for a Philips Hue bridge's local API."""

__version__ = '0.1.0'
