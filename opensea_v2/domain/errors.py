"""
Domain Layer: Error Taxonomy
One exception class per failure tag. Every operation raises exactly one of them.
"""
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


class OpenSeaApiError(Exception):
    """Base error for the OpenSea client"""


class TransportError(OpenSeaApiError):
    """DNS, connect, TLS or I/O failure. The cause is chained."""


class _CodecFailure(OpenSeaApiError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}" if path else reason)
        self.path = path
        self.reason = reason

    @classmethod
    def from_validation(cls, exc: ValidationError) -> "_CodecFailure":
        """Keeps the first failing location, dotted"""
        errors = exc.errors()
        if not errors:
            return cls("", str(exc))
        return cls(_format_loc(errors[0]), errors[0]["msg"])


class DecodingError(_CodecFailure):
    """Response body did not match the expected schema"""


class EncodingError(_CodecFailure):
    """Request could not be built or serialized"""


def _format_loc(error: "ErrorDetails") -> str:
    return ".".join(str(part) for part in error["loc"])


# --- Server errors ---

class OpenSeaErrorResponse(BaseModel):
    """Error envelope returned with HTTP 400"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    errors: List[str]

    @property
    def first(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


class OpenSeaDetailedErrorCode(Enum):
    """Error messages we recognize, by exact text"""

    ORDER_HASH_DOES_NOT_EXIST = "The order_hash you provided does not exist"
    ORDER_CANNOT_BE_FULFILLED = "This order can not be fulfilled at this time."


class OpenSeaDetailedError(OpenSeaApiError):
    """400 whose first message is a recognized one"""

    def __init__(self, code: OpenSeaDetailedErrorCode):
        super().__init__(code.value)
        self.code = code


class OpenSeaServerError(OpenSeaApiError):
    """400 with an unrecognized (or empty) error list"""

    def __init__(self, envelope: OpenSeaErrorResponse):
        super().__init__("; ".join(envelope.errors) or "OpenSea returned an empty error list")
        self.envelope = envelope


class OpenSeaStatusError(OpenSeaApiError):
    """Any non-2xx status other than 400"""

    def __init__(self, status: int, body: str):
        super().__init__(f"HTTP {status}: {body[:200]}")
        self.status = status
        self.body = body


def promote_error(envelope: OpenSeaErrorResponse) -> OpenSeaApiError:
    """
    Maps an error envelope to the exception to raise.
    Matching is on the first message only and is best effort: callers must
    still handle OpenSeaServerError.
    """
    code = _KNOWN_MESSAGES.get(envelope.first or "")
    if code is not None:
        return OpenSeaDetailedError(code)
    return OpenSeaServerError(envelope)


_KNOWN_MESSAGES = {code.value: code for code in OpenSeaDetailedErrorCode}
