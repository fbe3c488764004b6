"""GraphQL indexer client for transfer history."""

import logging

import requests

from .contract import error_message
from ..config import HTTP_TIMEOUT
from ..models.transfer import Transfer

logger = logging.getLogger(__name__)

TRANSFERS_QUERY = """
query RecentTransfers($first: Int!) {
  erc721Transfers(orderBy: timestamp, orderDirection: desc, first: $first) {
    id
    from { id }
    timestamp
    to { id }
    token { identifier uri }
    transaction { id timestamp }
  }
}
"""


class IndexerError(RuntimeError):
    """The indexer returned an error or an unexpected payload."""


class IndexerClient:
    """Client for the ERC-721 indexing middleware."""

    def __init__(self, graphql_url: str, auth_token: str):
        self.graphql_url = graphql_url
        self.auth_token = auth_token

    def query(self, query: str, variables: dict | None = None) -> dict:
        """Run a GraphQL query and return its `data` object."""
        try:
            response = requests.post(
                self.graphql_url,
                json={"query": query, "variables": variables or {}},
                headers={
                    "Content-Type": "application/json",
                    "x-auth-token": self.auth_token,
                },
                timeout=HTTP_TIMEOUT,
            )
        except requests.RequestException as e:
            raise IndexerError(f"GraphQL request failed: {e}")

        if not response.ok:
            raise IndexerError(error_message(response))

        try:
            result = response.json()
        except ValueError:
            raise IndexerError(f"Invalid JSON response ({response.status_code})")
        if not isinstance(result, dict):
            raise IndexerError("Unexpected response format")
        if result.get("errors"):
            raise IndexerError(result["errors"][0].get("message") or "GraphQL error occurred")
        if not result.get("data"):
            raise IndexerError("Unexpected response format")
        return result["data"]

    def recent_transfers(self, first: int = 100) -> list[Transfer]:
        """Most recent transfers, newest first."""
        data = self.query(TRANSFERS_QUERY, {"first": first})
        if "erc721Transfers" not in data:
            raise IndexerError("Unexpected response format")

        transfers = [Transfer.from_graphql(node) for node in data["erc721Transfers"]]
        logger.info(f"Transfer data loaded for {len(transfers)} transfers")
        return transfers
