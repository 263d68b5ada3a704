"""
Lambda invoke client.

Fire-and-forget invocation of follow-up functions.

Dependencies: boto3
System role: Asynchronous function trigger
"""

import json
import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tutor_backend.core.exceptions import UpstreamCallError

logger = logging.getLogger(__name__)


class FunctionInvoker:
    """Invokes Lambda functions with ``InvocationType="Event"``."""

    def __init__(self, region: str = "us-west-2", client: Any | None = None) -> None:
        self._client = client or boto3.client("lambda", region_name=region)

    def invoke_async(self, function_name: str, payload: dict[str, Any]) -> int:
        """
        Queue an asynchronous invocation.

        Returns:
            int: Status code reported by Lambda (202 on success)
        """
        try:
            response = self._client.invoke(
                FunctionName=function_name,
                InvocationType="Event",
                Payload=json.dumps(payload).encode("utf-8"),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("invoke_async - Failed to invoke %s: %s", function_name, e)
            raise UpstreamCallError(
                f"Invocation of {function_name} failed", provider="lambda"
            ) from e
        return response.get("StatusCode", 0)
