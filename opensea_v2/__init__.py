"""
opensea_v2: typed async client for the OpenSea v2 listings and fulfillment API
"""
from opensea_v2.application.pagination import iter_collection_listings, iter_orders
from opensea_v2.domain import *  # noqa: F401,F403
from opensea_v2.domain import __all__ as _domain_all
from opensea_v2.infrastructure.api_client import OpenSeaV2Client
from opensea_v2.infrastructure.config import OpenSeaApiConfig, load_config
from opensea_v2.infrastructure.log import configure_logging

__all__ = [
    *_domain_all,
    "OpenSeaApiConfig",
    "OpenSeaV2Client",
    "configure_logging",
    "iter_collection_listings",
    "iter_orders",
    "load_config",
]
