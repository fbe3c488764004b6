"""Smart-contract REST client (SettleMint ERC-721 API)."""

import logging
from typing import Any

import requests

from ..config import GAS_LIMIT, GAS_PRICE, HTTP_TIMEOUT

logger = logging.getLogger(__name__)

AUTH_HINT = (
    "Authentication failed. Please check your Settlemint token. "
    "The correct value should look like 'sm_aat_XXXXXXXX'."
)

# Keys the total-supply endpoint has been seen to use
SUPPLY_KEYS = ("totalSupply", "total", "supply", "count", "value")


class ContractError(RuntimeError):
    """A smart-contract API call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


def error_message(response: requests.Response) -> str:
    """Best human-readable message for a failed response."""
    message = f"Server returned {response.status_code}: {response.reason}"
    content_type = response.headers.get("content-type", "")

    if "application/json" in content_type:
        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Error parsing response: {e}")
            return message
        if isinstance(data, dict) and data.get("message"):
            return data["message"]
        return message

    logger.error(f"Non-JSON error response: {response.text}")
    if response.status_code == 401:
        return AUTH_HINT
    return message


def parse_total_supply(result: Any) -> int:
    """Extract the supply from a bare number or an object wrapping it."""
    supply = None
    if isinstance(result, (int, float)) and not isinstance(result, bool):
        supply = result
    elif isinstance(result, dict):
        for key in SUPPLY_KEYS:
            if result.get(key) is not None:
                supply = result[key]
                break

    if supply is None:
        logger.error(f"Response does not contain totalSupply. Full response: {result}")
        raise ContractError("Unexpected API response format: missing totalSupply field")

    try:
        return int(supply)
    except (TypeError, ValueError):
        raise ContractError(f"Invalid totalSupply value: {supply!r}")


class ContractClient:
    """Client for the ERC-721 contract endpoints of the smart-contract service."""

    def __init__(
        self,
        api_url: str,
        contract_address: str,
        auth_token: str,
        admin_address: str = "",
    ):
        self.base_url = f"{api_url.rstrip('/')}/erc-721/{contract_address}"
        self.auth_token = auth_token
        self.admin_address = admin_address

    def _get_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "x-auth-token": self.auth_token,
        }

    def _request(self, method: str, path: str, json: dict | None = None) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            response = requests.request(
                method, url, json=json, headers=self._get_headers(), timeout=HTTP_TIMEOUT
            )
        except requests.RequestException as e:
            raise ContractError(f"Request to {path} failed: {e}")

        if not response.ok:
            raise ContractError(error_message(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError:
            raise ContractError(
                f"Invalid JSON response from {path} ({response.status_code})",
                status_code=502,
            )

    def _transact(
        self, path: str, simulate: bool = False, input: dict | None = None, gas: bool = True
    ) -> Any:
        payload = {
            "from": self.admin_address,
            "gasLimit": GAS_LIMIT if gas else "",
            "gasPrice": GAS_PRICE if gas else "",
            "simulate": simulate,
            "metadata": {},
        }
        if input is not None:
            payload["input"] = input
        result = self._request("POST", path, json=payload)
        logger.info(f"{path} result: {result}")
        return result

    def total_supply(self) -> int:
        """Number of tokens minted so far."""
        result = self._request("GET", "total-supply")
        logger.info(f"Total supply result: {result}")
        return parse_total_supply(result)

    def collect_reserves(self) -> Any:
        return self._transact("collect-reserves", simulate=True, gas=False)

    def start_public_sale(self) -> Any:
        return self._transact("start-public-sale", simulate=True, gas=False)

    def pause(self) -> Any:
        return self._transact("pause")

    def unpause(self) -> Any:
        return self._transact("unpause")

    def set_base_uri(self, uri: str) -> Any:
        """Point token URIs at `uri`; a trailing slash is added if missing."""
        uri = uri.strip()
        if not uri.endswith("/"):
            uri = f"{uri}/"
        return self._transact("set-base-uri", input={"baseTokenURI_": uri})
