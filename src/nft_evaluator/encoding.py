import base64
import re
from typing import Any

BASE64_MARKER = ";base64,"
BASE64_PATTERN = re.compile(r"^([A-Za-z0-9+/]{4})*([A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{2}==)?$")


def strip_encoding_prefix(value: str) -> str:
    """Drop a data URI header such as ``data:application/json;base64,``"""
    if BASE64_MARKER in value:
        return value.split(BASE64_MARKER, 1)[1]
    return value


def is_encoded_payload(value: Any) -> bool:
    """
    Check if a token URI carries its metadata inline as base64.

    Accepts both bare base64 and base64 data URIs. Anything that is not a
    string is never an encoded payload.
    """
    if not isinstance(value, str):
        return False
    return BASE64_PATTERN.fullmatch(strip_encoding_prefix(value)) is not None


def decode_payload(value: str) -> str:
    """
    Decode an inline base64 payload to text.

    Raises:
        ValueError: if the payload is not valid base64 or not UTF-8
    """
    decoded_data = base64.b64decode(strip_encoding_prefix(value), validate=True)
    return decoded_data.decode('utf-8')
