"""
Application Layer: Ports (Interfaces)
Defines how the Application layer expects to interact with the Infrastructure.
"""
from typing import Optional, Protocol

from opensea_v2.domain import (
    CollectionResponse,
    FulfillListingRequest,
    FulfillListingResponse,
    GetAllListingsRequest,
    GetAllListingsResponse,
    RetrieveListingsRequest,
    RetrieveListingsResponse,
)


class IListingClient(Protocol):
    """Interface for discovering listings"""

    async def retrieve_listings(self, request: RetrieveListingsRequest) -> RetrieveListingsResponse:
        ...

    async def get_all_listings(
        self, collection_slug: str, request: Optional[GetAllListingsRequest] = None
    ) -> GetAllListingsResponse:
        ...


class ICollectionClient(Protocol):
    """Interface for collection metadata"""

    async def get_collection(self, collection_slug: str) -> CollectionResponse:
        ...


class IFulfillmentClient(Protocol):
    """Interface for fetching ready-to-submit fulfillment calls"""

    async def fulfill_listing(self, request: FulfillListingRequest) -> FulfillListingResponse:
        ...
