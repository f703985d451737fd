"""
Domain Layer
"""
from .api import (
    AdditionalRecipient,
    BasicOrderParameters,
    Fulfiller,
    FulfillListingRequest,
    FulfillListingResponse,
    FulfillmentData,
    GetAllListingsRequest,
    GetAllListingsResponse,
    InputData,
    Listing,
    OrderBy,
    OrderDirection,
    RetrieveListingsRequest,
    RetrieveListingsResponse,
    Transaction,
)
from .chain import Chain
from .collection import (
    CollectionContract,
    CollectionFee,
    CollectionResponse,
    PaymentToken,
    Rarity,
    RarityStrategy,
    SafelistStatus,
)
from .errors import (
    DecodingError,
    EncodingError,
    OpenSeaApiError,
    OpenSeaDetailedError,
    OpenSeaDetailedErrorCode,
    OpenSeaErrorResponse,
    OpenSeaServerError,
    OpenSeaStatusError,
    TransportError,
    promote_error,
)
from .orders import (
    Account,
    BasicListingPrice,
    ConsiderationItem,
    Currency,
    ItemListing,
    ItemType,
    OfferItem,
    Order,
    OrderFee,
    OrderSide,
    OrderType,
    Price,
    ProtocolOrderType,
    SeaportOrderParameters,
    SeaportProtocolData,
)
from .protocol import ProtocolVersion

__all__ = [
    "Account",
    "AdditionalRecipient",
    "BasicListingPrice",
    "BasicOrderParameters",
    "Chain",
    "CollectionContract",
    "CollectionFee",
    "CollectionResponse",
    "ConsiderationItem",
    "Currency",
    "DecodingError",
    "EncodingError",
    "Fulfiller",
    "FulfillListingRequest",
    "FulfillListingResponse",
    "FulfillmentData",
    "GetAllListingsRequest",
    "GetAllListingsResponse",
    "InputData",
    "ItemListing",
    "ItemType",
    "Listing",
    "OfferItem",
    "OpenSeaApiError",
    "OpenSeaDetailedError",
    "OpenSeaDetailedErrorCode",
    "OpenSeaErrorResponse",
    "OpenSeaServerError",
    "OpenSeaStatusError",
    "Order",
    "OrderBy",
    "OrderDirection",
    "OrderFee",
    "OrderSide",
    "OrderType",
    "PaymentToken",
    "Price",
    "ProtocolOrderType",
    "ProtocolVersion",
    "Rarity",
    "RarityStrategy",
    "RetrieveListingsRequest",
    "RetrieveListingsResponse",
    "SafelistStatus",
    "SeaportOrderParameters",
    "SeaportProtocolData",
    "Transaction",
    "TransportError",
    "promote_error",
]
