"""Mapping from object digests to their location under the store root."""
from pathlib import PurePosixPath

from .errors import InvalidDigestError

OBJECTS_DIR = 'objects'
DIGEST_LENGTH = 40


def object_path(digest: str) -> PurePosixPath:
    """Return ``objects/<first 2 chars>/<remaining 38 chars>`` for a digest.

    Only the length is checked; a 40 character string that is not hex yields
    a path that simply won't exist on disk.
    """
    if len(digest) != DIGEST_LENGTH:
        raise InvalidDigestError(
            f'object digest is invalid, needs to be {DIGEST_LENGTH} characters: {digest!r}')
    return PurePosixPath(OBJECTS_DIR, digest[:2], digest[2:])
