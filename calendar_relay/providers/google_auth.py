from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from calendar_relay.config import Settings
from calendar_relay.errors import AuthenticationError, ConfigurationError, ParameterStoreError
from calendar_relay.providers.parameter_store import ParameterStore

logger = logging.getLogger(__name__)


SCOPES: List[str] = [
    "https://www.googleapis.com/auth/calendar.readonly",
]
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"
AUTH_STATE = "state-token"

CodeSupplier = Callable[[str], str]


def console_code_supplier(auth_url: str) -> str:
    print(f"Go to the following link in your browser then type the authorization code:\n{auth_url}")
    try:
        return input().strip()
    except EOFError:
        raise AuthenticationError("Unable to read authorization code from stdin") from None


class StaticCodeSupplier:
    """Hands out a code obtained out of band (tests, GOOGLE_AUTH_CODE)."""

    def __init__(self, code: str):
        self.code = code

    def __call__(self, auth_url: str) -> str:
        logger.info("Using pre-supplied authorization code for %s", auth_url)
        return self.code


class TokenProvider:
    def __init__(self, store: ParameterStore, settings: Settings, code_supplier: CodeSupplier = console_code_supplier):
        self.store = store
        self.settings = settings
        self.code_supplier = code_supplier

    def load_client_config(self) -> Dict[str, Any]:
        name = self.settings.client_secret_parameter
        try:
            raw = self.store.get(name, decrypt=True)
        except ParameterStoreError as exc:
            logger.error("Error trying to get client secret parameter %s: %s", name, exc)
            raise ConfigurationError(f"Unable to read client secret parameter {name!r}") from exc
        try:
            client_config = json.loads(raw)
        except ValueError as exc:
            logger.error("Unable to parse client secret %s: %s", name, exc)
            raise AuthenticationError("Client secret is not valid JSON") from exc
        if not isinstance(client_config, dict) or not ({"installed", "web"} & client_config.keys()):
            logger.error("Client secret %s has neither an 'installed' nor a 'web' section", name)
            raise AuthenticationError("Client secret is not an OAuth client configuration")
        return client_config

    def _cached_credentials(self) -> Credentials | None:
        name = self.settings.token_parameter
        try:
            raw = self.store.get(name, decrypt=True)
            info = json.loads(raw)
            if not isinstance(info, dict):
                raise ValueError(f"expected a JSON object, got {type(info).__name__}")
            return Credentials.from_authorized_user_info(info, SCOPES)
        except (ParameterStoreError, ValueError) as exc:
            logger.warning("No usable cached token in %s: %s", name, exc)
            return None

    def _token_from_web(self, client_config: Dict[str, Any]) -> Credentials:
        section = client_config.get("installed") or client_config.get("web") or {}
        redirect_uris = section.get("redirect_uris") or [OOB_REDIRECT_URI]
        flow = Flow.from_client_config(client_config, scopes=SCOPES, redirect_uri=redirect_uris[0])
        auth_url, _state = flow.authorization_url(access_type="offline", state=AUTH_STATE)

        code = self.code_supplier(auth_url)
        if not code:
            raise AuthenticationError("No authorization code supplied")
        try:
            flow.fetch_token(code=code)
        except Exception as exc:  # noqa: BLE001
            logger.error("Unable to retrieve token from web: %s", exc)
            raise AuthenticationError("Authorization code exchange failed") from exc
        return flow.credentials

    def acquire(self) -> Credentials:
        """Return the cached credential, or run the interactive exchange once and cache it.

        The cached token is returned as-is; an expired access token is
        refreshed by google-auth when the first request is made.
        """
        client_config = self.load_client_config()
        creds = self._cached_credentials()
        if creds is not None:
            logger.info("Using cached Google token from %s", self.settings.token_parameter)
            return creds

        creds = self._token_from_web(client_config)
        self.store.put(self.settings.token_parameter, creds.to_json(), param_type="SecureString", overwrite=True)
        logger.info("Google token saved to %s", self.settings.token_parameter)
        return creds
