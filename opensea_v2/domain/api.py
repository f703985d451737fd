"""
Domain Layer: Request / Response Envelopes
Shapes for the listings, collection listings and fulfillment endpoints.
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field, PlainSerializer

from .chain import Chain
from .codecs import B256, U256, Address, EpochSeconds, HexBytes, TokenId, U256Number
from .models import CamelModel, RequestModel, WireModel
from .orders import ItemListing, Order, SeaportProtocolData
from .protocol import ProtocolVersion, protocol_address


class OrderBy(str, Enum):
    """eth_price is only supported when asset_contract_address and token_ids are also set"""

    CREATED_DATE = "created_date"
    ETH_PRICE = "eth_price"


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# --- Retrieve listings ---

class RetrieveListingsRequest(RequestModel):
    """Query for GET /orders/{chain}/seaport/listings"""

    # Address of the contract for an NFT
    asset_contract_address: Optional[Address] = None
    limit: Optional[int] = Field(default=None, ge=1, le=50)
    # Listings with a token_id matching any of these
    token_ids: List[TokenId] = []
    # Filter by the order maker's wallet address
    maker: Optional[Address] = None
    # Filter by the order taker's wallet address
    taker: Optional[Address] = None
    order_by: Optional[OrderBy] = None
    order_direction: Optional[OrderDirection] = None
    # Only show orders listed after this timestamp
    listed_after: Optional[EpochSeconds] = None
    # Only show orders listed before this timestamp
    listed_before: Optional[EpochSeconds] = None
    # Page token from a previous response's next/previous
    cursor: Optional[str] = None

    def with_cursor(self, cursor: Optional[str]) -> "RetrieveListingsRequest":
        return self.model_copy(update={"cursor": cursor})


class RetrieveListingsResponse(WireModel):
    next: Optional[str] = None
    previous: Optional[str] = None
    orders: List[Order] = []


# --- Collection listings ---

class GetAllListingsRequest(RequestModel):
    """Cursor pagination for GET /listings/collection/{slug}/all"""

    limit: Optional[int] = Field(default=None, ge=1, le=100)
    next: Optional[str] = None


class GetAllListingsResponse(WireModel):
    listings: List[ItemListing] = []
    next: Optional[str] = None


# --- Fulfillment ---

ProtocolAddress = Annotated[ProtocolVersion, PlainSerializer(protocol_address, return_type=str)]


class Listing(WireModel):
    """Listing we want to fulfill"""

    hash: B256
    chain: Chain
    protocol_version: ProtocolAddress = Field(alias="protocol_address")


class Fulfiller(WireModel):
    """Address which will submit the fulfillment transaction"""

    address: Address


class FulfillListingRequest(RequestModel):
    listing: Listing
    fulfiller: Fulfiller

    @classmethod
    def build(
        cls,
        order_hash: Any,
        fulfiller: Any,
        chain: Chain = Chain.ETHEREUM,
        protocol_version: ProtocolVersion = ProtocolVersion.V1_6,
    ) -> "FulfillListingRequest":
        """Convenience constructor from flat values (hex strings or bytes)"""
        return cls(
            listing={"hash": order_hash, "chain": chain, "protocol_address": protocol_version},
            fulfiller={"address": fulfiller},
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.to_wire()


class AdditionalRecipient(WireModel):
    amount: U256
    recipient: Address


class BasicOrderParameters(CamelModel):
    """Arguments of Seaport's fulfillBasicOrder call"""

    consideration_token: Address
    consideration_identifier: U256
    consideration_amount: U256
    offerer: Address
    zone: Address
    offer_token: Address
    offer_identifier: U256
    offer_amount: U256
    basic_order_type: int = Field(ge=0, le=255)
    start_time: U256
    end_time: U256
    zone_hash: B256
    salt: U256
    offerer_conduit_key: B256
    fulfiller_conduit_key: B256
    total_original_additional_recipients: U256
    additional_recipients: List[AdditionalRecipient] = []
    signature: HexBytes


class InputData(WireModel):
    parameters: BasicOrderParameters


class Transaction(WireModel):
    """Transaction call for onchain fulfillment"""

    function: str
    chain: int
    to: Address
    value: U256Number
    input_data: InputData


class FulfillmentData(WireModel):
    transaction: Transaction
    orders: List[SeaportProtocolData] = []


class FulfillListingResponse(WireModel):
    protocol: str
    fulfillment_data: FulfillmentData

    @property
    def protocol_version(self) -> Optional[ProtocolVersion]:
        """None for Seaport revisions this client does not know"""
        return _VERSIONS_BY_TAG.get(self.protocol)


_VERSIONS_BY_TAG = {version.value: version for version in ProtocolVersion}

