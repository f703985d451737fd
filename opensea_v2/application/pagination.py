"""
Application Layer: Cursor Pagination
Walks OpenSea's `next` cursors on top of the listing port.
"""
from typing import AsyncIterator, Optional, Set

import structlog

from opensea_v2.application.ports import IListingClient
from opensea_v2.domain import GetAllListingsRequest, ItemListing, Order, RetrieveListingsRequest

logger = structlog.get_logger()


async def iter_orders(
    client: IListingClient, request: Optional[RetrieveListingsRequest] = None
) -> AsyncIterator[Order]:
    """
    Yields every order matching `request`, page by page.
    Stops when the server returns no cursor, an empty page or a cursor it
    already handed out.
    """
    request = request or RetrieveListingsRequest()
    seen: Set[str] = set()
    while True:
        page = await client.retrieve_listings(request)
        for order in page.orders:
            yield order

        if not page.orders or not page.next or page.next in seen:
            return
        seen.add(page.next)
        logger.debug("listings_next_page", cursor=page.next)
        request = request.with_cursor(page.next)


async def iter_collection_listings(
    client: IListingClient, collection_slug: str, limit: Optional[int] = None
) -> AsyncIterator[ItemListing]:
    """Yields every active listing of a collection"""
    request = GetAllListingsRequest(limit=limit)
    seen: Set[str] = set()
    while True:
        page = await client.get_all_listings(collection_slug, request)
        for listing in page.listings:
            yield listing

        if not page.listings or not page.next or page.next in seen:
            return
        seen.add(page.next)
        logger.debug("collection_listings_next_page", slug=collection_slug, cursor=page.next)
        request = GetAllListingsRequest(limit=limit, next=page.next)
