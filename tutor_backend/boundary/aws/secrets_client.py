"""
Secrets Manager client.

Fetches JSON key/value bundles (provider API keys) by secret id.
Bundles are cached for the lifetime of the Lambda container.

Dependencies: boto3
System role: Secret accessor for provider credentials
"""

import json
import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tutor_backend.core.exceptions import UpstreamCallError

logger = logging.getLogger(__name__)


class SecretsClient:
    """Read-through cache over ``secretsmanager.get_secret_value``."""

    def __init__(self, region: str = "us-west-2", client: Any | None = None) -> None:
        """
        Initialize Secrets Manager client.

        Args:
            region: AWS region of the secrets
            client: Optional preconfigured boto3 client (tests)
        """
        self._client = client or boto3.client("secretsmanager", region_name=region)
        self._cache: dict[str, dict[str, Any]] = {}

    def get_secret(self, name: str) -> dict[str, Any]:
        """
        Return the decoded key/value bundle stored under ``name``.

        Raises:
            UpstreamCallError: Secret missing, unreadable, or not a JSON object
        """
        if name in self._cache:
            return self._cache[name]

        try:
            response = self._client.get_secret_value(SecretId=name)
        except (ClientError, BotoCoreError) as e:
            logger.error("get_secret - Failed to fetch secret %s: %s", name, e)
            raise UpstreamCallError(
                f"Failed to fetch secret {name}", provider="secretsmanager"
            ) from e

        secret_string = response.get("SecretString")
        if not secret_string:
            raise UpstreamCallError(
                f"Secret {name} has no SecretString", provider="secretsmanager"
            )

        try:
            bundle = json.loads(secret_string)
        except json.JSONDecodeError as e:
            raise UpstreamCallError(
                f"Secret {name} is not valid JSON", provider="secretsmanager"
            ) from e
        if not isinstance(bundle, dict):
            raise UpstreamCallError(
                f"Secret {name} is not a key/value bundle", provider="secretsmanager"
            )

        self._cache[name] = bundle
        logger.info("get_secret - Loaded secret %s", name)
        return bundle

    def get_value(self, name: str, key: str) -> str:
        """
        Return a single non-empty string value from a secret bundle.

        Raises:
            UpstreamCallError: Key missing or empty
        """
        value = self.get_secret(name).get(key)
        if not value:
            raise UpstreamCallError(
                f"Secret {name} is missing key {key}", provider="secretsmanager"
            )
        return str(value)
