"""HTTP client for the Hue Bridge local API.

HueClient wraps a requests.Session bound to https://<bridge>. The bridge
serves a self-signed certificate, so each client's session skips TLS
verification. The bypass is scoped to that session and does not touch other
HTTP traffic in the process.
"""

import requests
from requests.auth import AuthBase
from requests.packages.urllib3.exceptions import InsecureRequestWarning

from openhue.core.config import Settings
from openhue.core.exceptions import BridgeError, ClientError, LinkButtonNotPressed

# Disable SSL warnings for self-signed certificate
requests.packages.urllib3.disable_warnings(InsecureRequestWarning)

APPLICATION_KEY_HEADER = 'hue-application-key'
DEFAULT_TIMEOUT = 5
DEFAULT_DEVICE_TYPE = 'openhue#cli'

# Bridge error type returned by /api when the link button hasn't been pressed
LINK_BUTTON_NOT_PRESSED = 101


class ApplicationKeyAuth(AuthBase):
    """Adds the hue-application-key header to every outgoing request."""

    def __init__(self, key: str):
        if '\r' in key or '\n' in key:
            raise ClientError("Application key must not contain line breaks")
        self.key = key

    def __call__(self, request):
        request.headers[APPLICATION_KEY_HEADER] = self.key
        return request


def build_base_url(host: str) -> str:
    """Build the bridge base URL from a host or IP.

    Trailing slashes are dropped so paths join with exactly one '/'.

    Raises:
        ClientError: If the host carries a scheme, a path or whitespace
    """
    host = host.rstrip('/')
    if '://' in host or '/' in host or any(c.isspace() for c in host):
        raise ClientError(f"Invalid bridge address: {host!r}")
    return f"https://{host}"


class HueClient:
    """Thin wrapper around requests.Session for the bridge API."""

    def __init__(self, base_url: str, auth: AuthBase | None = None):
        """Initialise HueClient.

        Args:
            base_url: Bridge base URL, e.g. https://192.168.1.2
            auth: Request hook applied to every request (None for pairing)
        """
        self.base_url = base_url
        self.session = requests.Session()
        self.session.verify = False  # Accept self-signed certificate
        self.session.auth = auth

    @property
    def authenticated(self) -> bool:
        return self.session.auth is not None

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, json: dict | None = None,
                timeout: float = DEFAULT_TIMEOUT):
        """Make a request to the bridge and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            json: Optional request body
            timeout: Seconds to wait for the bridge

        Returns:
            Decoded JSON, or None for an empty body

        Raises:
            BridgeError: On transport errors, non-2xx responses or a body
                that isn't JSON
        """
        url = self.url_for(path)

        try:
            # verify is passed explicitly so REQUESTS_CA_BUNDLE can't override the session
            response = self.session.request(method, url, json=json, timeout=timeout, verify=False)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise BridgeError(
                f"{method} {path} failed: {e}",
                status_code=e.response.status_code,
                body=e.response.text,
            ) from e
        except requests.exceptions.RequestException as e:
            raise BridgeError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise BridgeError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def get(self, path: str, **kwargs):
        return self.request('GET', path, **kwargs)

    def put(self, path: str, json: dict, **kwargs):
        return self.request('PUT', path, json=json, **kwargs)

    def post(self, path: str, json: dict, **kwargs):
        return self.request('POST', path, json=json, **kwargs)

    def delete(self, path: str, **kwargs):
        return self.request('DELETE', path, **kwargs)

    def get_resources(self, resource_type: str) -> list[dict]:
        """List CLIP v2 resources of one type (light, room, scene, ...).

        The v2 API wraps results as {errors: [], data: [...]}; only data is
        returned.

        Raises:
            BridgeError: If the bridge reports errors and no data
        """
        result = self.get(f"/clip/v2/resource/{resource_type}")

        if not isinstance(result, dict):
            return result or []

        errors = result.get('errors') or []
        data = result.get('data')
        if errors and not data:
            descriptions = ', '.join(e.get('description', 'unknown error') for e in errors)
            raise BridgeError(f"Bridge returned errors for '{resource_type}': {descriptions}")

        return data or []

    def create_application_key(self, device_type: str = DEFAULT_DEVICE_TYPE) -> str:
        """Ask the bridge for a new application key.

        The link button on the bridge must have been pressed shortly before.

        Args:
            device_type: Application identifier shown in the Hue app

        Returns:
            The issued application key

        Raises:
            LinkButtonNotPressed: If the bridge answered with error type 101
            BridgeError: For any other error or an unexpected response
        """
        data = self.post('/api', json={'devicetype': device_type, 'generateclientkey': True})

        if not isinstance(data, list) or not data:
            raise BridgeError(f"Unexpected pairing response: {data!r}")

        entry = data[0]
        if 'success' in entry:
            return entry['success']['username']

        error = entry.get('error', {})
        description = error.get('description', 'Unknown error')
        if error.get('type') == LINK_BUTTON_NOT_PRESSED:
            raise LinkButtonNotPressed(description)
        raise BridgeError(description)


def new_client(settings: Settings) -> HueClient:
    """Create a HueClient that authenticates with settings.key.

    Raises:
        ClientError: If the auth hook or the client can't be built
    """
    auth = ApplicationKeyAuth(settings.key)
    return HueClient(build_base_url(settings.bridge), auth=auth)


def new_client_no_auth(host: str) -> HueClient:
    """Create a HueClient without an application key, for pairing.

    Raises:
        ClientError: If the host is not a usable bridge address
    """
    return HueClient(build_base_url(host))
