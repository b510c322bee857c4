"""
NFT metadata and image storage evaluator.

Rates where a token's metadata and image live: inline in the token URI,
on IPFS, on Arweave, or on a server someone has to keep running.
"""

import json
import logging
from typing import Any, Optional, Tuple

from .config import Settings, get_settings
from .encoding import is_encoded_payload, decode_payload
from .fetcher import HTTPTransport, MetadataFetcher, Transport
from .models import EvaluationResult
from .types import LocationType, Protocol, Rating
from .uri_parsers import URIResolver

logger = logging.getLogger(__name__)

ARWEAVE_HOST = "arweave.net"

# Metadata reasons
METADATA_ONCHAIN = "Metadata stored in TokenURI (on-chain)"
METADATA_IPFS = "TokenURI is IPFS link"
METADATA_PRIVATE_SERVER = "TokenURI contains only link to private server"
METADATA_UNKNOWN = "Does not match any known TokenURI patterns"

# Image reasons
IMAGE_EMBEDDED = "Image is embedded in metadata"
IMAGE_IPFS = "Image is hosted on IPFS"
IMAGE_ARWEAVE = "Image is hosted on Arweave"
IMAGE_PRIVATE_SERVER = "Image is hosted on private server"
IMAGE_UNKNOWN = "Image does not match known pattern"


def reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_metadata(metadata_str: Optional[str]) -> Optional[Any]:
    """Parse metadata JSON, returning None if there is none to be had"""
    if metadata_str is None:
        return None
    try:
        return json.loads(metadata_str, parse_constant=reject_constant)
    except ValueError:
        return None


def is_embedded_image(image: Any) -> bool:
    return isinstance(image, str) and image.startswith("data:image")


def get_image(metadata: Any) -> Any:
    if isinstance(metadata, dict):
        return metadata.get("image")
    return None


class NFTEvaluator:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
        uri_resolver: Optional[URIResolver] = None,
    ):
        self.settings = settings or get_settings()
        self.uri_resolver = uri_resolver or URIResolver(gateway=self.settings.IPFS_GATEWAY)
        self.transport = transport or HTTPTransport(timeout=self.settings.FETCH_TIMEOUT, user_agent=self.settings.USER_AGENT)
        self.fetcher = MetadataFetcher(self.transport)

    def _unknown(self) -> EvaluationResult:
        return EvaluationResult(rating=Rating.UNKNOWN, reasons=[METADATA_UNKNOWN], metadata=None)

    def _decode_embedded(self, token_uri: str) -> Optional[Any]:
        try:
            metadata_str = decode_payload(token_uri)
        except ValueError as e:
            logger.debug(f"Encoded token URI could not be decoded: {e}")
            return None
        return parse_metadata(metadata_str)

    async def _fetch_linked(self, token_uri: str) -> Tuple[Protocol, Optional[Any]]:
        resolved = self.uri_resolver.resolve(token_uri)
        logger.debug(f"Resolvable url is {resolved.url} ({resolved.protocol.value})")
        metadata_str = await self.fetcher.fetch_text(resolved.url)
        return resolved.protocol, parse_metadata(metadata_str)

    def evaluate_image(self, metadata: Any) -> Tuple[Rating, str]:
        """Rate where the image referenced by the metadata is stored"""
        image = get_image(metadata)
        if is_embedded_image(image):
            return Rating.GREEN, IMAGE_EMBEDDED

        resolved = self.uri_resolver.resolve(image)
        if resolved.protocol == Protocol.DECENTRALIZED:
            return Rating.GREEN, IMAGE_IPFS
        if resolved.protocol == Protocol.WEB:
            # only the arweave.net gateway is recognized, not ar:// URIs
            if resolved.host == ARWEAVE_HOST:
                return Rating.GREEN, IMAGE_ARWEAVE
            return Rating.RED, IMAGE_PRIVATE_SERVER
        return Rating.YELLOW, IMAGE_UNKNOWN

    async def evaluate_nft(self, token_uri: str) -> EvaluationResult:
        """
        Rate the storage of a token's metadata and image.

        Args:
            token_uri: The tokenURI value, a link or inline base64 metadata

        Returns:
            EvaluationResult with the rating, reasons and parsed metadata

        Raises:
            FetchFailure: if linked metadata cannot be reached
        """
        logger.debug(f"Evaluating token URI {token_uri!r}")

        if is_encoded_payload(token_uri):
            logger.debug("Token URI is an encoded payload")
            metadata = self._decode_embedded(token_uri)
            if metadata is None:
                return self._unknown()
            image_rating, image_reason = self.evaluate_image(metadata)
            return EvaluationResult(rating=image_rating, reasons=[METADATA_ONCHAIN, image_reason], metadata=metadata)

        logger.debug("Token URI is a link")
        protocol, metadata = await self._fetch_linked(token_uri)
        if metadata is None:
            logger.debug("Linked metadata is not JSON")
            return self._unknown()

        if protocol == Protocol.DECENTRALIZED:
            image_rating, image_reason = self.evaluate_image(metadata)
            return EvaluationResult(rating=image_rating, reasons=[METADATA_IPFS, image_reason], metadata=metadata)

        # the image can be moved along with the metadata, so it is not rated
        return EvaluationResult(rating=Rating.RED, reasons=[METADATA_PRIVATE_SERVER], metadata=metadata)

    async def classify_metadata_location(self, token_uri: str) -> LocationType:
        """Report where the metadata lives without rating it"""
        if is_encoded_payload(token_uri):
            metadata = self._decode_embedded(token_uri)
            return LocationType.EMBEDDED if metadata is not None else LocationType.OTHER

        protocol, metadata = await self._fetch_linked(token_uri)
        if metadata is None:
            return LocationType.OTHER
        if protocol == Protocol.DECENTRALIZED:
            return LocationType.DECENTRALIZED
        return LocationType.WEB

    def classify_image_location(self, image: Any) -> LocationType:
        """Report where an image value points; Arweave counts as web here"""
        if is_embedded_image(image):
            return LocationType.EMBEDDED

        resolved = self.uri_resolver.resolve(image)
        if resolved.protocol == Protocol.DECENTRALIZED:
            return LocationType.DECENTRALIZED
        if resolved.protocol == Protocol.WEB:
            return LocationType.WEB
        return LocationType.OTHER

