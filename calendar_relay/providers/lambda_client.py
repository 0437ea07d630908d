from __future__ import annotations

import logging
from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

from calendar_relay.errors import TransportError


logger = logging.getLogger(__name__)


class LambdaInvoker:
    def __init__(self, client):
        self.client = client

    def invoke(self, function_name: str, payload: bytes) -> Dict[str, Any]:
        """Invoke ``function_name`` and wait for it to finish."""
        try:
            resp = self.client.invoke(
                FunctionName=function_name,
                InvocationType="RequestResponse",
                Payload=payload,
            )
        except (ClientError, BotoCoreError) as e:
            raise TransportError(f"Invoking {function_name} failed: {e}") from e
        if resp.get("FunctionError"):
            raise TransportError(f"{function_name} returned {resp['FunctionError']} error")
        return resp
