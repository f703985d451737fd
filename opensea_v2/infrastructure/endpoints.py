"""
Infrastructure Layer: API Endpoints
"""
from dataclasses import dataclass
from urllib.parse import quote

from opensea_v2.domain import Chain

API_BASE_MAINNET = "https://api.opensea.io/api"
API_BASE_TESTNET = "https://testnets-api.opensea.io"
API_VERSION = "v2"


@dataclass(frozen=True)
class ApiUrl:
    """URL builder rooted at {base}/v2"""

    base: str

    @classmethod
    def for_chain(cls, chain: Chain) -> "ApiUrl":
        root = API_BASE_TESTNET if chain.is_test() else API_BASE_MAINNET
        return cls(base=f"{root}/{API_VERSION}")

    def listings(self, chain: Chain) -> str:
        return f"{self.base}/orders/{chain}/seaport/listings"

    def all_listings(self, collection_slug: str) -> str:
        return f"{self.base}/listings/collection/{_segment(collection_slug)}/all"

    def collection(self, collection_slug: str) -> str:
        return f"{self.base}/collections/{_segment(collection_slug)}"

    def fulfill_listing(self) -> str:
        return f"{self.base}/listings/fulfillment_data"


def _segment(value: str) -> str:
    return quote(value, safe="")
