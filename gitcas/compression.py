"""zlib codec for records persisted in the object store."""
import zlib

from .errors import CorruptStreamError

DEFAULT_LEVEL = zlib.Z_DEFAULT_COMPRESSION


def compress(raw: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    return zlib.compress(raw, level)


def decompress(data: bytes) -> bytes:
    d = zlib.decompressobj()
    try:
        out = d.decompress(data) + d.flush()
    except zlib.error as err:
        raise CorruptStreamError(f'error decompressing object: {err}') from err
    if not d.eof:
        raise CorruptStreamError('error decompressing object: stream is truncated')
    if d.unused_data:
        raise CorruptStreamError(
            f'error decompressing object: {len(d.unused_data)} bytes after end of stream')
    return out
