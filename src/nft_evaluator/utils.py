from typing import Any

ELLIPSIS = "..."


def pretty_address(address: str) -> str:
    """Shorten an address to 0x...abcd for display"""
    return f"{address[:2]}{ELLIPSIS}{address[-4:]}"


def shorten_metadata(metadata: Any, max_length: int = 100) -> Any:
    """
    Shorten long strings in parsed token metadata for display.

    Inline images and SVGs can run to megabytes; they are cut down to their
    head and tail so the media type stays visible. Keys are never shortened
    and a max_length of 0 or less disables shortening.
    """
    if max_length <= 0:
        return metadata

    if isinstance(metadata, dict):
        return {key: shorten_metadata(value, max_length) for key, value in metadata.items()}
    if isinstance(metadata, list):
        return [shorten_metadata(value, max_length) for value in metadata]
    if not isinstance(metadata, str) or len(metadata) <= max_length:
        return metadata

    keep = max_length - len(ELLIPSIS)
    if keep < 2:
        return metadata[:max_length] + ELLIPSIS
    head = keep - keep // 2
    return f"{metadata[:head]}{ELLIPSIS}{metadata[len(metadata) - keep // 2:]}"
