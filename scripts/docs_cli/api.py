"""HTTP client for a running docs server, used by `call --remote`."""
import json
import os
from urllib.request import Request, urlopen
from urllib.error import HTTPError, URLError

from anthropic_docs.config import settings


class APIError(Exception):
    """API error with status code and details."""
    def __init__(self, status_code: int, detail):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Error {status_code}: {detail}")


class ConnectionError(Exception):
    """Connection error."""
    pass


def get_url() -> str:
    """Get the docs server URL from env or server settings."""
    return os.environ.get("ANTHROPIC_DOCS_URL") or f"http://{settings.DEFAULT_HOST}:{settings.DEFAULT_PORT}"


def _error_detail(error: HTTPError):
    """Reason from a FastAPI error body, or the bare status."""
    try:
        return json.loads(error.read().decode())["detail"]
    except (ValueError, KeyError, TypeError):
        return f"HTTP {error.code}"


def api_request(method: str, endpoint: str, data: dict = None, timeout: int = 30) -> dict:
    """Send a JSON request to the docs server and return the decoded reply.

    Raises APIError for HTTP error statuses and ConnectionError when the
    server cannot be reached.
    """
    body = None if data is None else json.dumps(data).encode()
    req = Request(
        get_url().rstrip("/") + endpoint,
        data=body,
        headers={"Content-Type": "application/json"},
        method=method,
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            return json.loads(resp.read().decode())
    except HTTPError as e:
        raise APIError(e.code, _error_detail(e)) from None
    except URLError as e:
        raise ConnectionError(f"Connection error: {e.reason}") from None
