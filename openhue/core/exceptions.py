"""Error types raised by the openhue core.

Commands translate these into click errors; nothing here exits the process.
"""


class OpenHueError(Exception):
    """Base class for all openhue errors."""


class ConfigurationMissing(OpenHueError):
    """Raised when a command needs a configuration that could not be loaded.

    Attributes:
        path: The config file that was looked for
        detail: Parser error message, or None if the file was simply absent
    """

    def __init__(self, path, detail: str | None = None):
        self.path = path
        self.detail = detail
        message = f"No usable configuration at {path}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ClientError(OpenHueError):
    """Raised when a HueClient cannot be constructed."""


class BridgeError(OpenHueError):
    """Raised when a request to the bridge fails."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class LinkButtonNotPressed(BridgeError):
    """The bridge refused pairing because its link button was not pressed."""
