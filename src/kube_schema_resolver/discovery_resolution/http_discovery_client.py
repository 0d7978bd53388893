"""OpenAPI v3 discovery transport over HTTP."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import requests

from kube_schema_resolver.configuration.runtime_settings import DiscoverySettings
from kube_schema_resolver.schema_management.resolution_errors import (
    DiscoveryError,
    SchemaDecodeError,
)
from kube_schema_resolver.schema_management.schema_models import CONTENT_TYPE_JSON

LOGGER = logging.getLogger(__name__)

DISCOVERY_ROOT_PATH = "/openapi/v3"


class _HttpRequester:
    """Issue GET requests against the API server with shared auth and TLS settings."""

    def __init__(self, settings: DiscoverySettings, session: requests.Session) -> None:
        self._settings = settings
        self._session = session

    def get(self, relative_url: str, content_type: str) -> bytes:
        url = f"{self._settings.base_url}/{relative_url.lstrip('/')}"
        headers = {"Accept": content_type}
        if self._settings.bearer_token:
            headers["Authorization"] = f"Bearer {self._settings.bearer_token}"
        verify: bool | str = self._settings.verify_tls
        if self._settings.verify_tls and self._settings.ca_bundle_path is not None:
            verify = str(self._settings.ca_bundle_path)

        LOGGER.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers=headers,
                timeout=self._settings.timeout_seconds,
                verify=verify,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as exc:
            raise DiscoveryError(f"Request to {url} timed out.") from exc
        except requests.exceptions.HTTPError as exc:
            raise DiscoveryError(f"Request to {url} failed: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise DiscoveryError(f"Cannot reach {url}: {exc}") from exc
        return response.content


class HttpGroupVersionSource:
    """Schema handle for one discovery path."""

    def __init__(self, requester: _HttpRequester, server_relative_url: str) -> None:
        self._requester = requester
        self.server_relative_url = server_relative_url

    def schema(self, content_type: str) -> bytes:
        return self._requester.get(self.server_relative_url, content_type)


class HttpOpenAPIV3Discovery:
    """Discovery transport reading the API server's /openapi/v3 index.

    A session passed in by the caller stays open; a session created here is closed by close().
    """

    def __init__(
        self,
        settings: DiscoverySettings,
        session: requests.Session | None = None,
    ) -> None:
        self._owned_session: requests.Session | None = None
        if session is None:
            session = self._owned_session = requests.Session()
        self._requester = _HttpRequester(settings, session)

    def __enter__(self) -> HttpOpenAPIV3Discovery:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owned_session is not None:
            self._owned_session.close()
            self._owned_session = None

    def paths(self) -> dict[str, HttpGroupVersionSource]:
        """Return every advertised group/version path mapped to its schema handle."""
        payload = self._requester.get(DISCOVERY_ROOT_PATH, CONTENT_TYPE_JSON)
        try:
            root: Any = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SchemaDecodeError(f"Invalid discovery response: {exc}") from exc

        if not isinstance(root, Mapping) or not isinstance(root.get("paths"), Mapping):
            raise SchemaDecodeError("Discovery response must contain a paths object.")

        sources: dict[str, HttpGroupVersionSource] = {}
        for path, entry in root["paths"].items():
            if not isinstance(entry, Mapping):
                raise SchemaDecodeError(f"Discovery entry for {path!r} must be an object.")
            relative_url = entry.get("serverRelativeURL")
            if not isinstance(relative_url, str) or not relative_url:
                raise SchemaDecodeError(f"Discovery entry for {path!r} has no serverRelativeURL.")
            sources[path] = HttpGroupVersionSource(self._requester, relative_url)
        LOGGER.debug("Discovery advertised %d paths", len(sources))
        return sources
