from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from calendar_relay.errors import ParameterNotFoundError, ParameterStoreError


logger = logging.getLogger(__name__)


class ParameterStore:
    """Thin wrapper around the SSM parameter calls used for secrets."""

    def __init__(self, client):
        self.client = client

    def get(self, name: str, decrypt: bool = True) -> str:
        try:
            resp = self.client.get_parameter(Name=name, WithDecryption=decrypt)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "ClientError")
            if code == "ParameterNotFound":
                raise ParameterNotFoundError(name) from e
            logger.error("SSM get_parameter %s failed: %s", name, e)
            raise ParameterStoreError(name, code, str(e)) from e
        except BotoCoreError as e:
            logger.error("SSM get_parameter %s failed: %s", name, e)
            raise ParameterStoreError(name, type(e).__name__, str(e)) from e
        return resp["Parameter"]["Value"]

    def put(self, name: str, value: str, param_type: str = "SecureString", overwrite: bool = True) -> int:
        try:
            resp = self.client.put_parameter(Name=name, Value=value, Type=param_type, Overwrite=overwrite)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "ClientError")
            logger.error("SSM put_parameter %s failed: %s", name, e)
            raise ParameterStoreError(name, code, str(e)) from e
        except BotoCoreError as e:
            logger.error("SSM put_parameter %s failed: %s", name, e)
            raise ParameterStoreError(name, type(e).__name__, str(e)) from e
        version = resp["Version"]
        logger.info("Stored SSM parameter %s (version %d)", name, version)
        return version
