"""Generic HTTP transport for the FullContact REST API.

Processing flow:
    1. Join the configured endpoint with the resource path.
    2. Attach credentials (header or `apiKey` query parameter).
    3. Hand the optional body to `requests` as `json=`.
    4. Send one request through a shared `requests.Session`.
    5. Raise on non-success status, otherwise return the decoded JSON body.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the
    configured timeout.

Error handling strategy:
    - HTTP status failures propagate as `requests.HTTPError`.
    - Network failures propagate as `requests.RequestException` subclasses.
    - Malformed JSON bodies propagate as `ValueError` from `response.json()`.
    Callers own failure interpretation; nothing is wrapped or swallowed here.

Security considerations:
    Debug logs carry method, path and status only. The API key and request
    bodies are never logged.
"""

import logging

import requests

from fullcontact.client.config import AUTH_TYPES, ClientConfig

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-FullContact-APIKey"
API_KEY_PARAM = "apiKey"


class Transport:
    """Synchronous GET/POST/DELETE dispatcher returning decoded JSON."""

    def __init__(self, config: ClientConfig | None = None, session=None) -> None:
        """Initialize the transport.

        Args:
            config: Endpoint and credential settings. Defaults to
                `ClientConfig.from_env()`.
            session: Optional preconfigured `requests.Session`.

        Raises:
            ValueError: If `config.auth_type` is not a supported mode.
        """
        self.config = config or ClientConfig.from_env()
        if self.config.auth_type not in AUTH_TYPES:
            raise ValueError(f"Unsupported auth type: {self.config.auth_type}")
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.session.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL for a resource path."""
        endpoint = self.config.endpoint
        if not endpoint.endswith("/"):
            endpoint += "/"
        return endpoint + path.lstrip("/")

    def get(self, path: str, params: dict | None = None):
        return self.request("GET", path, params=params)

    def delete(self, path: str, params: dict | None = None):
        return self.request("DELETE", path, params=params)

    def post(self, path: str, params: dict | None = None, body=None):
        return self.request("POST", path, params=params, body=body)

    def request(self, method: str, path: str, params: dict | None = None, body=None):
        """Send one request and return the decoded response body.

        Args:
            method: HTTP verb.
            path: Resource path relative to the configured endpoint.
            params: Query parameters, sent as given.
            body: JSON-serializable request body, or `None` for no body.

        Returns:
            Decoded JSON document, or `{}` for an empty success body.

        Raises:
            requests.HTTPError: Non-success status.
            requests.RequestException: Transport failure.
            ValueError: Response body is not valid JSON.
        """
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        query = dict(params or {})

        if self.config.api_key:
            if self.config.auth_type == "query":
                query[API_KEY_PARAM] = self.config.api_key
            else:
                headers[API_KEY_HEADER] = self.config.api_key

        logger.debug("FullContact request: %s %s", method, path)

        response = self.session.request(
            method,
            self.url_for(path),
            params=query or None,
            json=body,
            headers=headers,
            timeout=self.config.timeout_seconds,
            proxies=self.config.proxies,
        )

        logger.debug(
            "FullContact response: %s %s -> %s", method, path, response.status_code
        )
        response.raise_for_status()

        if not response.content:
            return {}
        return response.json()
