"""Core functionality for openhue.

This package contains:
- config: Settings Store for ~/.openhue/config.yaml
- client: HueClient and the authenticated/unauthenticated client factories
- context: Per-run application context handed to every command
- discovery: Bridge discovery via the Philips discovery service
- exceptions: Error types raised by the core
"""
