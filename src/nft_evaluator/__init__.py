__version__ = "0.1.0"

from typing import Any, Tuple

from .config import Settings, get_settings
from .encoding import is_encoded_payload, strip_encoding_prefix, decode_payload
from .evaluator import NFTEvaluator
from .exceptions import NFTEvaluatorError, FetchFailure
from .fetcher import HTTPTransport, MetadataFetcher, Transport
from .models import EvaluationResult, ResolvedUri
from .types import Rating, Protocol, LocationType
from .uri_parsers import URIResolver


def resolve(uri: Any) -> ResolvedUri:
    return URIResolver(gateway=get_settings().IPFS_GATEWAY).resolve(uri)


async def evaluate_nft(token_uri: str) -> EvaluationResult:
    return await NFTEvaluator().evaluate_nft(token_uri)


def evaluate_image(metadata: Any) -> Tuple[Rating, str]:
    return NFTEvaluator().evaluate_image(metadata)


async def classify_metadata_location(token_uri: str) -> LocationType:
    return await NFTEvaluator().classify_metadata_location(token_uri)


def classify_image_location(image: Any) -> LocationType:
    return NFTEvaluator().classify_image_location(image)


__all__ = [
    "Settings",
    "get_settings",
    "is_encoded_payload",
    "strip_encoding_prefix",
    "decode_payload",
    "NFTEvaluator",
    "NFTEvaluatorError",
    "FetchFailure",
    "HTTPTransport",
    "MetadataFetcher",
    "Transport",
    "EvaluationResult",
    "ResolvedUri",
    "Rating",
    "Protocol",
    "LocationType",
    "URIResolver",
    "resolve",
    "evaluate_nft",
    "evaluate_image",
    "classify_metadata_location",
    "classify_image_location",
]
