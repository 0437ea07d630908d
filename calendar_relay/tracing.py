from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from aws_xray_sdk.core import patch, xray_recorder


logger = logging.getLogger(__name__)


SERVICE_NAME = "calendar-relay"

_patched = False


def configure_tracing(enabled: bool) -> bool:
    """Patch boto3 so SSM and Lambda calls show up as X-Ray subsegments.

    Patching happens once per process; warm Lambda containers reuse it.
    """
    global _patched
    if not enabled:
        return False
    if not _patched:
        xray_recorder.configure(service=SERVICE_NAME, context_missing="LOG_ERROR")
        patch(["boto3"])
        _patched = True
        logger.info("X-Ray tracing enabled for boto3")
    return True


@contextmanager
def trace_phase(name: str, enabled: bool) -> Iterator[Optional[object]]:
    if not enabled:
        yield None
        return
    with xray_recorder.in_subsegment(name) as subsegment:
        yield subsegment
