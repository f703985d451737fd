"""
Domain Layer: Orders
OpenSea order records and the Seaport order struct nested in them.
"""
from enum import Enum, IntEnum
from typing import Annotated, Any, List, Optional, Union

from pydantic import Field, StrictStr, model_validator

from .chain import Chain
from .codecs import B256, U256, Address, Counter, EpochSecondsText, HexBytes, UserId
from .models import CamelModel, WireModel


class OrderSide(str, Enum):
    ASK = "ask"
    BID = "bid"


class OrderType(str, Enum):
    BASIC = "basic"
    DUTCH = "dutch"
    ENGLISH = "english"
    CRITERIA = "criteria"


class Currency(str, Enum):
    """Currencies with a dedicated member; anything else stays a plain string"""

    ETH = "ETH"


# "ETH" -> Currency.ETH, "USD" -> "USD"
CurrencyCode = Annotated[
    Union[Currency, Annotated[StrictStr, Field(min_length=1)]],
    Field(union_mode="left_to_right"),
]


# --- Seaport types ---

class ItemType(IntEnum):
    NATIVE = 0
    ERC20 = 1
    ERC721 = 2
    ERC1155 = 3
    ERC721_WITH_CRITERIA = 4
    ERC1155_WITH_CRITERIA = 5


class ProtocolOrderType(IntEnum):
    FULL_OPEN = 0  # No partial fills, anyone can execute
    PARTIAL_OPEN = 1  # Partial fills supported, anyone can execute
    FULL_RESTRICTED = 2  # No partial fills, only offerer or zone can execute
    PARTIAL_RESTRICTED = 3  # Partial fills supported, only offerer or zone can execute


class OfferItem(CamelModel):
    item_type: ItemType
    token: Address
    identifier_or_criteria: U256
    start_amount: U256
    end_amount: U256


class ConsiderationItem(OfferItem):
    recipient: Address


class SeaportOrderParameters(CamelModel):
    """
    Mirror of the on-chain OrderComponents struct.
    Described in seaport-js (src/types.ts, OrderParameters).
    """

    offerer: Address
    offer: List[OfferItem]
    consideration: List[ConsiderationItem]
    start_time: EpochSecondsText
    end_time: EpochSecondsText
    order_type: ProtocolOrderType
    zone: Address
    zone_hash: B256
    # decimal on most listings, 0x-hex on some
    salt: str
    conduit_key: B256
    total_original_consideration_items: int = Field(ge=0)
    counter: Counter

    @model_validator(mode="after")
    def _check_consideration_count(self) -> "SeaportOrderParameters":
        if len(self.consideration) != self.total_original_consideration_items:
            raise ValueError(
                f"totalOriginalConsiderationItems is {self.total_original_consideration_items} "
                f"but {len(self.consideration)} consideration items were sent"
            )
        return self


class SeaportProtocolData(WireModel):
    parameters: SeaportOrderParameters
    signature: Optional[HexBytes] = None


# --- Accounts and fees ---

class Account(WireModel):
    user: Optional[UserId] = None
    profile_img_url: str = ""
    address: Address
    config: str = ""


class OrderFee(WireModel):
    account: Account
    basis_points: str


# --- Legacy asset bundles ---
# No server documentation exists for most of these; undocumented fields are
# kept as raw JSON values.

class LegacyCollection(WireModel):
    slug: str
    name: Optional[str] = None
    created_date: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    banner_image_url: Optional[str] = None
    external_url: Optional[str] = None
    safelist_request_status: Optional[str] = None
    display_data: Any = None
    fees: Any = None
    is_nsfw: bool = False
    is_rarity_enabled: bool = False
    is_creator_fees_enforced: bool = False


class AssetContract(WireModel):
    address: str
    asset_contract_type: Optional[str] = None
    chain_identifier: Optional[str] = None
    created_date: Optional[str] = None
    name: Optional[str] = None
    nft_version: Any = None
    opensea_version: Optional[str] = None
    owner: Optional[int] = None
    schema_name: Optional[str] = None
    symbol: Optional[str] = None
    total_supply: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
    image_url: Optional[str] = None
    payout_address: Optional[str] = None


class Asset(WireModel):
    id: int
    token_id: str
    num_sales: int = 0
    background_color: Any = None
    image_url: Optional[str] = None
    image_preview_url: Optional[str] = None
    image_thumbnail_url: Optional[str] = None
    image_original_url: Optional[str] = None
    animation_url: Any = None
    animation_original_url: Any = None
    name: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
    asset_contract: Optional[AssetContract] = None
    permalink: Optional[str] = None
    collection: Optional[LegacyCollection] = None
    decimals: Any = None
    token_metadata: Optional[str] = None
    is_nsfw: bool = False
    owner: Any = None


class Bundle(WireModel):
    assets: List[Asset] = []
    maker: Any = None
    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
    asset_contract: Any = None
    permalink: Optional[str] = None
    seaport_sell_orders: Any = None


_BUNDLE_DEPRECATION = "asset bundles are deprecated by OpenSea; read protocol_data instead"


# --- Orders ---

class Order(WireModel):
    """The latest OpenSea Order schema"""

    created_date: str
    closing_date: Optional[str] = None
    # Order can be created before the listing time.
    listing_time: int
    expiration_time: int
    order_hash: Optional[str] = None
    # Only seaport is currently supported.
    protocol_data: SeaportProtocolData
    protocol_address: Optional[str] = None
    current_price: U256
    maker: Account
    taker: Optional[Account] = None
    maker_fees: List[OrderFee] = []
    taker_fees: List[OrderFee] = []
    side: OrderSide
    order_type: OrderType
    cancelled: bool = False
    finalized: bool = False
    marked_invalid: bool = False
    remaining_quantity: int = 1
    client_signature: Optional[str] = None
    relay_id: Optional[str] = None
    criteria_proof: Optional[Any] = None

    maker_asset_bundle: Optional[Bundle] = Field(
        default=None, exclude=True, repr=False, deprecated=_BUNDLE_DEPRECATION
    )
    taker_asset_bundle: Optional[Bundle] = Field(
        default=None, exclude=True, repr=False, deprecated=_BUNDLE_DEPRECATION
    )


class Price(WireModel):
    currency: CurrencyCode
    decimals: int
    # raw base units as sent, e.g. "25000000000000000000"
    value: str


class BasicListingPrice(WireModel):
    current: Price


class ItemListing(WireModel):
    """Listing summary returned by the collection listings endpoint"""

    order_hash: str
    chain: Chain
    order_type: OrderType = Field(alias="type")
    price: BasicListingPrice
    protocol_data: SeaportProtocolData
    protocol_address: Optional[str] = None
