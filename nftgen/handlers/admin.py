"""AWS Lambda handler for contract administration and transfer history."""

import dataclasses

from ._common import contract_client, parse_body, response
from ..clients.contract import ContractError
from ..clients.indexer import IndexerClient, IndexerError
from ..config import SETTLEMINT_GRAPHQL_URL, SETTLEMINT_TOKEN

OPERATIONS = ("collect_reserves", "start_public_sale", "pause", "unpause", "set_base_uri")


def handler(event, context):
    """
    Input payload:
    {"operation": "collect_reserves" | "start_public_sale" | "pause" | "unpause"
                  | "set_base_uri" | "transfers",
     "base_uri": "https://.../metadata",   # set_base_uri only
     "first": 100}                          # transfers only
    """
    try:
        body = parse_body(event)
    except ValueError:
        return response(400, {"error": "Invalid JSON body"})
    operation = body.get("operation")

    if operation == "transfers":
        first = str(body.get("first", 100))
        if not first.isdigit():
            return response(400, {"error": "'first' must be a positive integer"})
        return _transfers(int(first))

    if operation not in OPERATIONS:
        return response(400, {"error": f"Unknown operation '{operation}'"})
    if operation == "set_base_uri" and not (body.get("base_uri") or "").strip():
        return response(400, {"error": "Missing 'base_uri' field"})

    contract = contract_client()
    if contract is None:
        return response(500, {"error": "Contract API is not configured"})

    try:
        if operation == "set_base_uri":
            result = contract.set_base_uri(body["base_uri"])
        else:
            result = getattr(contract, operation)()
    except ContractError as e:
        print(f"Failed to {operation}: {e}", flush=True)
        return response(e.status_code or 502, {"error": str(e)})

    return response(200, {"operation": operation, "result": result})


def _transfers(first: int):
    if not SETTLEMINT_GRAPHQL_URL:
        return response(500, {"error": "GraphQL API is not configured"})

    try:
        transfers = IndexerClient(SETTLEMINT_GRAPHQL_URL, SETTLEMINT_TOKEN).recent_transfers(first)
    except IndexerError as e:
        print(f"Failed to fetch transfer data: {e}", flush=True)
        return response(502, {"error": str(e)})

    return response(200, {
        "count": len(transfers),
        "transfers": [dataclasses.asdict(t) for t in transfers],
    })
