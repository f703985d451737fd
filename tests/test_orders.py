from datetime import datetime, timezone

import pytest

from opensea_v2 import (
    Chain,
    Currency,
    DecodingError,
    GetAllListingsResponse,
    ItemType,
    OrderSide,
    OrderType,
    ProtocolOrderType,
    RetrieveListingsResponse,
    SeaportOrderParameters,
)

FIRST_LISTING_HASH = "0x541a9eb3962494caffeda36a495cc978c7ecc21c6b714aaabc678187d3da9ac7"
OFFERER = bytes.fromhex("193d3eda0dbabd55453de814ef08a6255446c911")


@pytest.fixture
def listings_response(fixture_json):
    """Mainnet response from the listings endpoint."""
    return RetrieveListingsResponse.decode(fixture_json("response_get_listings.json"))


@pytest.fixture
def collection_listings(fixture_json):
    """Response from the collection listings endpoint."""
    return GetAllListingsResponse.decode(fixture_json("response_get_all_listings.json"))


def test_retrieve_listings_cursor(listings_response):
    """Test that the pagination cursor is carried through decoding."""
    assert listings_response.next == "LXBrPTExNTE5Njk3NjYw"
    assert listings_response.previous is None
    assert len(listings_response.orders) == 1


def test_order_fields(listings_response):
    """Test decoding of a full mainnet order."""
    order = listings_response.orders[0]

    assert order.current_price == 1_780_000_000_000_000_000
    assert order.side is OrderSide.ASK
    assert order.order_type is OrderType.BASIC
    assert order.listing_time == 1691681235
    assert order.maker.user == "14210173"
    assert order.maker.address == OFFERER
    assert order.maker_fees[0].account.user == "1"
    assert order.maker_fees[0].basis_points == "250"
    assert order.relay_id == "T3JkZXJWMlR5cGU6MTIyNjkxODgzMjQ="
    assert order.taker is None

    parameters = order.protocol_data.parameters
    assert parameters.offer[0].item_type is ItemType.ERC721
    assert parameters.offer[0].identifier_or_criteria == 7421
    assert parameters.consideration[1].start_amount == 44_500_000_000_000_000
    assert parameters.order_type is ProtocolOrderType.FULL_OPEN
    assert parameters.counter == 0
    assert order.protocol_data.signature is None


def test_collection_listing_item(collection_listings):
    """Test the first listing of a collection listings page."""
    listing = collection_listings.listings[0]

    assert collection_listings.next == "LXBrPTExNjA5NDk4NjQ1"
    assert listing.order_hash == FIRST_LISTING_HASH
    assert listing.chain is Chain.ETHEREUM
    assert listing.order_type is OrderType.BASIC
    assert listing.price.current.value == "25000000000000000000"
    assert listing.price.current.currency == "USD"
    assert not isinstance(listing.price.current.currency, Currency)
    assert listing.price.current.decimals == 18

    parameters = listing.protocol_data.parameters
    assert parameters.start_time == datetime(2023, 10, 29, 4, 50, 26, tzinfo=timezone.utc)
    assert parameters.counter == 0
    assert isinstance(parameters.counter, int)
    assert parameters.salt.startswith("0x360c6ebe")


def test_collection_listing_aliases(collection_listings):
    """Test that chain aliases, known currencies and string counters decode."""
    listing = collection_listings.listings[1]

    assert listing.chain is Chain.ETHEREUM
    assert listing.price.current.currency is Currency.ETH
    assert listing.protocol_data.parameters.counter == "1"
    assert len(listing.protocol_data.signature) == 64


def test_collection_listing_reserializes(collection_listings):
    """Test that re-encoding a listing keeps currency, counter and timestamps as sent."""
    for listing in collection_listings.listings:
        wire = listing.to_wire()
        assert type(listing).decode(wire) == listing

    first = collection_listings.listings[0].to_wire()
    assert first["type"] == "basic"
    assert first["price"]["current"]["currency"] == "USD"
    assert first["protocol_data"]["parameters"]["startTime"] == "1698555026"
    assert first["protocol_data"]["parameters"]["counter"] == 0

    second = collection_listings.listings[1].to_wire()
    assert second["chain"] == "ethereum"
    assert second["price"]["current"]["currency"] == "ETH"
    assert second["protocol_data"]["parameters"]["counter"] == "1"


def test_bundles_are_deprecated(listings_response):
    """Test that bundle access warns and bundles are left out of serialization."""
    order = listings_response.orders[0]

    with pytest.warns(DeprecationWarning):
        bundle = order.maker_asset_bundle
    assert bundle.assets[0].token_id == "7421"
    assert bundle.assets[0].collection.slug == "boredapeyachtclub"

    assert "maker_asset_bundle" not in order.to_wire()
    assert "taker_asset_bundle" not in order.to_wire()


def test_testnet_order_tolerates_missing_fields(fixture_json):
    """Test that sparse testnet orders decode with defaults."""
    response = RetrieveListingsResponse.decode(fixture_json("response_get_listings_testnet.json"))

    order = response.orders[0]
    assert response.next is None
    assert order.maker.user is None
    assert order.maker.profile_img_url == ""
    assert order.maker_fees == []
    assert order.relay_id is None
    assert order.order_hash is None
    assert order.remaining_quantity == 1
    assert order.current_price == 1_000_000_000_000_000

    parameters = order.protocol_data.parameters
    assert parameters.offer[0].item_type is ItemType.ERC1155
    assert parameters.order_type is ProtocolOrderType.PARTIAL_OPEN
    assert parameters.counter == "0"
    assert parameters.salt == "0x72db8c0b"


def test_consideration_count_must_match(fixture_json):
    """Test that a consideration count mismatch fails decoding."""
    payload = fixture_json("response_get_listings.json")
    parameters = payload["orders"][0]["protocol_data"]["parameters"]
    parameters["totalOriginalConsiderationItems"] = 3

    with pytest.raises(DecodingError) as exc_info:
        RetrieveListingsResponse.decode(payload)
    assert exc_info.value.path.startswith("orders.0.protocol_data.parameters")


def test_bad_price_reports_path(fixture_json):
    """Test that decoding errors name the failing field."""
    payload = fixture_json("response_get_listings.json")
    payload["orders"][0]["current_price"] = "-1"

    with pytest.raises(DecodingError) as exc_info:
        RetrieveListingsResponse.decode(payload)
    assert exc_info.value.path == "orders.0.current_price"


def test_empty_currency_rejected(fixture_json):
    """Test that an empty currency code is not accepted."""
    payload = fixture_json("response_get_all_listings.json")
    payload["listings"][0]["price"]["current"]["currency"] = ""

    with pytest.raises(DecodingError):
        GetAllListingsResponse.decode(payload)


def test_parameters_use_camel_case(fixture_json):
    """Test that Seaport parameters serialize back to the camelCase keys they arrived with."""
    payload = fixture_json("response_get_all_listings.json")
    raw = payload["listings"][0]["protocol_data"]["parameters"]

    parameters = SeaportOrderParameters.decode(raw)
    wire = parameters.to_wire()
    assert set(wire) == set(raw)
    assert wire["conduitKey"] == raw["conduitKey"]
