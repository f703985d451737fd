"""
Domain Layer: Base Wire Models
Shared pydantic configuration for request and response shapes.
"""
import json
from typing import Any, Dict, List, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticSerializationError

from .errors import DecodingError, EncodingError

M = TypeVar("M", bound="WireModel")


class WireModel(BaseModel):
    """Immutable value object decoded from (or encoded to) OpenSea JSON"""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @classmethod
    def decode(cls: Type[M], payload: Any) -> M:
        """Validates parsed JSON, raising DecodingError with the failing path"""
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise DecodingError.from_validation(e) from e

    @classmethod
    def decode_json(cls: Type[M], body: str) -> M:
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise DecodingError("", f"invalid JSON: {e}") from e
        return cls.decode(payload)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict; values the wire cannot carry raise EncodingError"""
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodingError("", str(e)) from e


class CamelModel(WireModel):
    """Seaport structs use camelCase keys on the wire"""

    model_config = ConfigDict(alias_generator=to_camel)


class RequestModel(WireModel):
    """
    Top-level caller-built request. Bad input surfaces as EncodingError rather
    than pydantic's ValidationError. Nested parts must be plain WireModels so
    the error keeps its full path.
    """

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise EncodingError.from_validation(e) from e

    def to_query(self) -> List[Tuple[str, str]]:
        """
        Linearizes the request into query pairs.
        Sequences repeat their key once per element (token_ids=1&token_ids=2),
        as OpenSea expects.
        """
        pairs: List[Tuple[str, str]] = []
        for key, value in self.to_wire().items():
            if isinstance(value, list):
                pairs.extend((key, _query_value(item)) for item in value)
            else:
                pairs.append((key, _query_value(value)))
        return pairs


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int)):
        return str(value)
    raise EncodingError("", f"cannot place {type(value).__name__} in a query string")
