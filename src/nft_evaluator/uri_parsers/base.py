from abc import ABC, abstractmethod
from pydantic import AnyUrl
from ..models import ResolvedUri

DEFAULT_IPFS_GATEWAY = "https://ipfs.io/ipfs/"


class URIParser(ABC):
    @abstractmethod
    def can_handle(self, url: AnyUrl) -> bool:
        """Check if this parser can handle the given parsed URI"""
        pass

    @abstractmethod
    def resolve(self, uri: str, url: AnyUrl) -> ResolvedUri:
        """Turn the URI into a fetchable URL and classify its protocol"""
        pass
