"""
Domain Layer: Collection Metadata
Response of GET /collections/{slug}.
"""
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from .chain import Chain
from .codecs import Address
from .models import WireModel


class SafelistStatus(str, Enum):
    NOT_REQUESTED = "not_requested"
    REQUESTED = "requested"
    APPROVED = "approved"
    VERIFIED = "verified"
    DISABLED_TOP_TRENDING = "disabled_top_trending"


class RarityStrategy(str, Enum):
    OPENRARITY = "openrarity"


class Rarity(WireModel):
    strategy_id: RarityStrategy
    strategy_version: Optional[str] = None
    calculated_at: Optional[str] = None
    max_rank: Optional[int] = None
    tokens_scored: Optional[int] = None


class CollectionContract(WireModel):
    address: Address
    chain: Chain


class CollectionFee(WireModel):
    # percent, e.g. 2.5
    fee: Decimal
    recipient: Address
    required: bool = False


class PaymentToken(WireModel):
    symbol: str
    address: Address
    chain: Chain
    image: Optional[str] = None
    name: Optional[str] = None
    decimals: int
    eth_price: Optional[Decimal] = None
    usd_price: Optional[Decimal] = None


class CollectionResponse(WireModel):
    """Collection metadata; the slug is carried in `collection`"""

    slug: str = Field(alias="collection")
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    banner_image_url: Optional[str] = None
    owner: Optional[str] = None
    safelist_status: SafelistStatus = SafelistStatus.NOT_REQUESTED
    category: Optional[str] = None
    is_disabled: bool = False
    is_nsfw: bool = False
    trait_offers_enabled: bool = False
    collection_offers_enabled: bool = False
    opensea_url: Optional[str] = None
    project_url: Optional[str] = None
    wiki_url: Optional[str] = None
    discord_url: Optional[str] = None
    telegram_url: Optional[str] = None
    twitter_username: Optional[str] = None
    instagram_username: Optional[str] = None
    contracts: List[CollectionContract] = []
    editors: List[str] = []
    fees: List[CollectionFee] = []
    rarity: Optional[Rarity] = None
    payment_tokens: List[PaymentToken] = []
    total_supply: Optional[int] = None
    created_date: Optional[date] = None
    # undocumented, kept raw
    display_data: Any = None
