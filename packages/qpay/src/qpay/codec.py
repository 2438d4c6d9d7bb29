"""
JSON encoding and response classification shared by token and API calls.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from qpay.baseclient.response import RawResponse
from qpay.exceptions import APIError, DecodingError, EncodingError
from qpay.models.base import APIBaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_body(body: APIBaseModel) -> bytes:
    """
    Serialize a request model to JSON bytes.

    Raises:
        EncodingError: If the model holds a value that cannot be serialized.
    """
    try:
        return body.to_wire()
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(str(e)) from e


def raise_for_status(response: RawResponse) -> None:
    """Raise an APIError for any status outside [200, 300)."""
    if not response.is_success:
        error = APIError.from_response(response)
        logger.debug(f"API error {error.status_code}: {error.code}")
        raise error


def decode_body(response: RawResponse, model: type[ModelT]) -> ModelT:
    """
    Classify ``response`` and parse its body into ``model``.

    Raises:
        APIError: If the status is not 2xx.
        DecodingError: If a 2xx body is not valid JSON for ``model``.
    """
    raise_for_status(response)
    try:
        return model.model_validate_json(response.body)
    except ValidationError as e:
        raise DecodingError(f"{model.__name__}: {e}") from e
