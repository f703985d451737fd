"""
Domain Layer: Scalar Codecs
Converters between OpenSea's JSON scalars and typed values, and the
pydantic annotated types built on top of them.
Pure functions, no I/O.
"""
from datetime import datetime, timezone
from typing import Annotated, Any, Union

from eth_utils import decode_hex, encode_hex, is_0x_prefixed
from pydantic import BeforeValidator, Field, PlainSerializer, PlainValidator, StrictInt, StrictStr

U256_MAX = 2**256 - 1
U128_MAX = 2**128 - 1

ADDRESS_SIZE = 20
B256_SIZE = 32

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# --- Codec errors ---

class CodecError(ValueError):
    """Base for scalar codec rejections"""


class InvalidNumber(CodecError):
    """Not a valid unsigned 256-bit decimal"""


class ValueTooLarge(CodecError):
    """Value does not fit the JSON number encoding"""


class InvalidHex(CodecError):
    """Not a valid 0x-prefixed hex string of the expected size"""


class InvalidTimestamp(CodecError):
    """Not a representable Unix timestamp"""


# --- U256 ---

def parse_u256(value: Any) -> int:
    """
    Decodes a decimal string or JSON integer into an unsigned 256-bit int.
    Signs, whitespace, floats and booleans are rejected.
    """
    if isinstance(value, bool):
        raise InvalidNumber(f"expected an unsigned integer, got {value!r}")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if not value or not value.isascii() or not value.isdigit():
            raise InvalidNumber(f"not a decimal integer: {value!r}")
        number = int(value)
    else:
        raise InvalidNumber(f"expected a decimal string or integer, got {type(value).__name__}")

    if number < 0:
        raise InvalidNumber(f"negative value: {number}")
    if number > U256_MAX:
        raise InvalidNumber(f"value overflows 256 bits: {number}")
    return number


def format_u256(value: int) -> str:
    return str(parse_u256(value))


def format_u256_number(value: int) -> int:
    """JSON number form; only values below 2**128 are emitted."""
    number = parse_u256(value)
    if number > U128_MAX:
        raise ValueTooLarge(f"{number} does not fit in 128 bits")
    return number


# --- Hex ---

def parse_hex_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str) or not is_0x_prefixed(value):
        raise InvalidHex(f"expected a 0x-prefixed hex string, got {value!r}")
    try:
        return decode_hex(value)
    except ValueError as e:
        raise InvalidHex(f"malformed hex string {value!r}: {e}") from e


def format_hex_bytes(value: bytes) -> str:
    return encode_hex(value)


def _parse_fixed(value: Any, size: int, kind: str) -> bytes:
    raw = parse_hex_bytes(value)
    if len(raw) != size:
        raise InvalidHex(f"{kind} must be {size} bytes, got {len(raw)}")
    return raw


def parse_address(value: Any) -> bytes:
    return _parse_fixed(value, ADDRESS_SIZE, "address")


def parse_b256(value: Any) -> bytes:
    return _parse_fixed(value, B256_SIZE, "hash")


# --- Timestamps ---

def parse_epoch_seconds(value: Any) -> datetime:
    """Unix seconds (JSON number or decimal string) -> aware UTC datetime"""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        # same range as the numeric form: nothing before the epoch
        if value < EPOCH:
            raise InvalidTimestamp(f"timestamp before 1970: {value.isoformat()}")
        return value.astimezone(timezone.utc)
    try:
        seconds = parse_u256(value)
    except InvalidNumber as e:
        raise InvalidTimestamp(str(e)) from e
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestamp(f"timestamp out of range: {seconds}") from e


def format_epoch_seconds(value: datetime) -> int:
    return int(parse_epoch_seconds(value).timestamp())


def format_epoch_seconds_text(value: datetime) -> str:
    return str(format_epoch_seconds(value))


# --- Polymorphic scalars ---

def normalize_user_id(value: Any) -> Any:
    """User ids arrive as numbers or strings; keep them as strings"""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def normalize_token_id(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise InvalidNumber(f"token id must be a decimal string, got {value!r}")
    return value


# --- Annotated types ---

U256 = Annotated[int, PlainValidator(parse_u256), PlainSerializer(format_u256, return_type=str)]
U256Number = Annotated[
    int, PlainValidator(parse_u256), PlainSerializer(format_u256_number, return_type=int)
]

Address = Annotated[
    bytes, PlainValidator(parse_address), PlainSerializer(format_hex_bytes, return_type=str)
]
B256 = Annotated[
    bytes, PlainValidator(parse_b256), PlainSerializer(format_hex_bytes, return_type=str)
]
HexBytes = Annotated[
    bytes, PlainValidator(parse_hex_bytes), PlainSerializer(format_hex_bytes, return_type=str)
]

EpochSeconds = Annotated[
    datetime, PlainValidator(parse_epoch_seconds), PlainSerializer(format_epoch_seconds, return_type=int)
]
EpochSecondsText = Annotated[
    datetime,
    PlainValidator(parse_epoch_seconds),
    PlainSerializer(format_epoch_seconds_text, return_type=str),
]

UserId = Annotated[str, BeforeValidator(normalize_user_id)]
TokenId = Annotated[str, PlainValidator(normalize_token_id)]

# Shape preserving: 0 stays a number, "0" stays a string.
Counter = Annotated[Union[StrictInt, StrictStr], Field(union_mode="left_to_right")]
