"""
Infrastructure Layer: OpenSea v2 Client Adapter
"""
import asyncio
import json
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

import aiohttp
import structlog
from pydantic import ValidationError

from opensea_v2.application.ports import ICollectionClient, IFulfillmentClient, IListingClient
from opensea_v2.domain import (
    Chain,
    CollectionResponse,
    DecodingError,
    FulfillListingRequest,
    FulfillListingResponse,
    GetAllListingsRequest,
    GetAllListingsResponse,
    OpenSeaErrorResponse,
    OpenSeaStatusError,
    RetrieveListingsRequest,
    RetrieveListingsResponse,
    TransportError,
    promote_error,
)
from opensea_v2.domain.models import WireModel
from opensea_v2.infrastructure.config import OpenSeaApiConfig
from opensea_v2.infrastructure.endpoints import ApiUrl

logger = structlog.get_logger()

R = TypeVar("R", bound=WireModel)

API_KEY_HEADER = "X-API-KEY"


class OpenSeaV2Client(IListingClient, ICollectionClient, IFulfillmentClient):
    """
    Adapter for the OpenSea v2 API using aiohttp.
    Implements the listing, collection and fulfillment ports.

    One instance can be shared by concurrent tasks. Nothing is retried or
    cached: every call returns the decoded response or raises a single
    OpenSeaApiError subclass.
    """

    def __init__(
        self,
        config: Optional[OpenSeaApiConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self._config = config if config is not None else OpenSeaApiConfig()
        self._url = ApiUrl.for_chain(self._config.chain)
        # A caller-supplied session is used as is and never closed here
        self._session = session
        self._owns_session = session is None

    @property
    def chain(self) -> Chain:
        return self._config.chain

    @property
    def base_url(self) -> str:
        return self._url.base

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.api_key is not None:
            headers[API_KEY_HEADER] = self._config.api_key.get_secret_value()
        return headers

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if not self._owns_session:
                raise TransportError("the supplied aiohttp session is closed")
            connector = aiohttp.TCPConnector(
                limit=100,
                limit_per_host=20,
                ttl_dns_cache=300,
                enable_cleanup_closed=True,
            )
            # no client-side deadline; callers bound calls with asyncio.timeout
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=None),
            )
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "OpenSeaV2Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # --- Listing port ---

    async def retrieve_listings(
        self, request: Optional[RetrieveListingsRequest] = None
    ) -> RetrieveListingsResponse:
        """Listings for this client's chain, filtered by `request`"""
        request = request or RetrieveListingsRequest()
        return await self._request(
            "GET",
            self._url.listings(self.chain),
            RetrieveListingsResponse,
            params=request.to_query(),
        )

    async def get_all_listings(
        self, collection_slug: str, request: Optional[GetAllListingsRequest] = None
    ) -> GetAllListingsResponse:
        """All active listings of a collection, one page at a time"""
        request = request or GetAllListingsRequest()
        return await self._request(
            "GET",
            self._url.all_listings(collection_slug),
            GetAllListingsResponse,
            params=request.to_query(),
        )

    # --- Collection port ---

    async def get_collection(self, collection_slug: str) -> CollectionResponse:
        return await self._request("GET", self._url.collection(collection_slug), CollectionResponse)

    # --- Fulfillment port ---

    async def fulfill_listing(self, request: FulfillListingRequest) -> FulfillListingResponse:
        """
        Returns the arguments necessary to fulfill an order onchain.
        Raises OpenSeaDetailedError for the error messages OpenSea is known to send
        (unknown order hash, order not fillable).
        """
        return await self._request(
            "POST",
            self._url.fulfill_listing(),
            FulfillListingResponse,
            payload=request.to_payload(),
        )

    # --- Transport ---

    async def _request(
        self,
        method: str,
        url: str,
        response_model: Type[R],
        params: Optional[List[Tuple[str, str]]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> R:
        session = await self._get_session()
        logger.debug("opensea_request", method=method, url=url, params=params)

        try:
            async with session.request(
                method, url, params=params, json=payload, headers=self._headers()
            ) as response:
                status = response.status
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug("opensea_response", method=method, url=url, status=status)
        return _decode_response(status, body, response_model)


def _decode_response(status: int, body: bytes, response_model: Type[R]) -> R:
    """2xx -> model, 400 -> error envelope, anything else -> status error"""
    if 200 <= status < 300:
        return response_model.decode_json(_utf8(body))
    if status == 400:
        raise promote_error(_decode_error_envelope(_utf8(body)))
    raise OpenSeaStatusError(status, body.decode("utf-8", errors="replace"))


def _utf8(body: bytes) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError("", f"response body is not valid UTF-8: {e}") from e


def _decode_error_envelope(body: str) -> OpenSeaErrorResponse:
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodingError("", f"invalid JSON in error response: {e}") from e
    try:
        return OpenSeaErrorResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodingError.from_validation(e) from e
