"""Helpers shared by the Lambda handlers."""

import json
from typing import Any

from ..clients.contract import ContractClient
from ..config import (
    SETTLEMINT_API_URL,
    SETTLEMINT_TOKEN,
    CONTRACT_ADDRESS,
    ADMIN_WALLET_ADDRESS,
)


def parse_body(event: dict) -> dict:
    """Request body from an SQS record or an HTTP event."""
    if "Records" in event:
        body = json.loads(event["Records"][0]["body"])
    else:
        body = json.loads(event.get("body") or "{}")
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def response(status_code: int, body: Any, headers: dict | None = None) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": json.dumps(body),
    }


def contract_client() -> ContractClient | None:
    """Contract client from the environment, or None if it isn't configured."""
    if not (SETTLEMINT_API_URL and CONTRACT_ADDRESS):
        return None
    return ContractClient(
        SETTLEMINT_API_URL, CONTRACT_ADDRESS, SETTLEMINT_TOKEN, ADMIN_WALLET_ADDRESS
    )
