"""Object key helpers: unescaping event keys and deriving destination keys."""

import re
from urllib.parse import unquote_plus

from .exceptions import KeyDecodeError

AVIF_EXTENSION = ".avif"

# "%" must always introduce two hex digits
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_key(raw_key: str) -> str:
    """
    Decode a URL-escaped S3 key into its literal form.

    S3 event notifications deliver keys query-escaped: spaces arrive as
    ``+`` and other reserved characters as ``%XX``. A key without escape
    characters is returned unchanged.

    Args:
        raw_key: Key as delivered in the invocation event

    Returns:
        Literal S3 key

    Raises:
        KeyDecodeError: If the key holds a malformed escape sequence or the
            escaped bytes are not valid UTF-8
    """
    malformed = _MALFORMED_ESCAPE.search(raw_key)
    if malformed:
        bad_escape = raw_key[malformed.start() : malformed.start() + 3]
        raise KeyDecodeError(
            f"failed to decode S3 key: invalid escape {bad_escape!r}", key=raw_key
        )

    try:
        return unquote_plus(raw_key, errors="strict")
    except UnicodeDecodeError as e:
        raise KeyDecodeError(f"failed to decode S3 key: {e}", key=raw_key) from e


def derive_target_key(decoded_key: str, target_extension: str = AVIF_EXTENSION) -> str:
    """
    Calculate the destination key by swapping the source file extension.

    Only the last path segment is considered. Everything from its last dot
    on is the extension, including a leading dot (``.hidden``) or a bare
    trailing dot. A segment without any dot gets ``target_extension``
    appended.

    Examples:
        >>> derive_target_key("a/b/photo.jpg")
        'a/b/photo.avif'
        >>> derive_target_key("a/b/photo")
        'a/b/photo.avif'
        >>> derive_target_key("a.b.jpg")
        'a.b.avif'
        >>> derive_target_key("noext.")
        'noext.avif'
        >>> derive_target_key("dir/.hidden")
        'dir/.avif'
    """
    segment_start = decoded_key.rfind("/") + 1
    dot = decoded_key.rfind(".", segment_start)
    root = decoded_key if dot == -1 else decoded_key[:dot]
    return root + target_extension
