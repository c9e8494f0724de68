from pydantic import TypeAdapter, ValidationError
from functools import lru_cache
import logging

logger = logging.getLogger(__name__)

# Only 200 and 201 count as success
MAX_SUCCESS_CODE = 201


class HC3Error(Exception):
    def __init__(self, code=None, message=""):
        super().__init__(message or f"HTTP {code}")
        self.code = code
        self.message = message


class HC3HTTPError(HC3Error):
    """Hub answered with a status above MAX_SUCCESS_CODE (or the transport failed)"""

    def __init__(self, code, message=""):
        super().__init__(code, message)


class HC3DecodeError(HC3Error):
    """Response body did not match the expected schema"""

    def __init__(self, message):
        super().__init__(None, message)


@lru_cache(maxsize=None)
def _adapter(schema):
    return TypeAdapter(schema)


def decode_json(data, schema):
    """Validate a raw JSON string against `schema` (a model class or typing form)."""
    return _adapter(schema).validate_json(data)


def _identity(value):
    return value


def decode(code, data, schema, projection=_identity):
    """Turn a (status, body) pair into `projection(body as schema)`.

    Raises HC3HTTPError when `code` is above 201 and HC3DecodeError when the
    body does not validate. The projection is applied only to a fully
    decoded value.
    """
    if code > MAX_SUCCESS_CODE:
        logger.error(f"Hub returned HTTP {code}")
        raise HC3HTTPError(code)
    try:
        decoded = decode_json(data, schema)
    except ValidationError as e:
        logger.error(f"Failed to decode response: {e}")
        raise HC3DecodeError(str(e))
    return projection(decoded)
