from typing import Optional, List, Any, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from .types import Rating, Protocol


class ResolvedUri(BaseModel):
    """Where a URI can be fetched from and how it is hosted"""
    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    protocol: Protocol
    host: Optional[str] = None

    @model_validator(mode='after')
    def check_unparsed_has_no_location(self) -> 'ResolvedUri':
        if self.protocol == Protocol.NONE and (self.url is not None or self.host is not None):
            raise ValueError("Unresolvable URI cannot carry a url or host")
        return self

    @classmethod
    def unresolved(cls) -> 'ResolvedUri':
        return cls(protocol=Protocol.NONE)


class EvaluationResult(BaseModel):
    rating: Rating
    reasons: List[str] = Field(min_length=1)
    metadata: Optional[Any] = None  # parsed metadata JSON, None when parsing failed

    def as_tuple(self) -> Tuple[Rating, List[str], Optional[Any]]:
        """Get the result as a (rating, reasons, metadata) tuple"""
        return self.rating, list(self.reasons), self.metadata

