"""Indexed ERC-721 transfer."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Transfer:
    """One transfer event as returned by the GraphQL indexer."""
    id: str
    from_address: str
    to_address: str
    timestamp: str
    token_identifier: str
    token_uri: str | None = None
    transaction_id: str | None = None
    transaction_timestamp: str | None = None

    @staticmethod
    def from_graphql(node: dict[str, Any]) -> "Transfer":
        token = node.get("token") or {}
        transaction = node.get("transaction") or {}
        return Transfer(
            id=node["id"],
            from_address=(node.get("from") or {}).get("id", ""),
            to_address=(node.get("to") or {}).get("id", ""),
            timestamp=str(node.get("timestamp", "")),
            token_identifier=str(token.get("identifier", "")),
            token_uri=token.get("uri"),
            transaction_id=transaction.get("id"),
            transaction_timestamp=transaction.get("timestamp"),
        )
