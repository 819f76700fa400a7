"""CLI command modules.

This package contains:
- setup: Coloured command group, setup and help commands
- auth: Bridge discovery and pairing commands (discover, auth)
- resources: Commands that read from the configured bridge (get, config)
"""
