"""Object storage for blobs and trees (zlib-compressed loose objects)."""
import logging
from pathlib import Path
from typing import Union

from . import compression
from .errors import DigestMismatchError, ObjectNotFoundError
from .objects import Object, build_record, digest, names_only, parse_record, render
from .paths import object_path

logger = logging.getLogger(__name__)

__all__ = ['ObjectStore', 'render', 'names_only']


class ObjectStore:
    def __init__(self, root: Union[str, Path], compression_level: int = compression.DEFAULT_LEVEL):
        self.root = Path(root)
        self.compression_level = compression_level

    def path_for(self, oid: str) -> Path:
        return self.root / object_path(oid)

    def exists(self, oid: str) -> bool:
        return self.path_for(oid).is_file()

    def persist(self, path: Path, record: bytes):
        """Write the compressed record to path, replacing any existing file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = compression.compress(record, self.compression_level)
        path.write_bytes(data)
        logger.debug('wrote %s (%d bytes, %d compressed)', path, len(record), len(data))

    def write_object(self, obj: Object, persist: bool = True) -> str:
        record = build_record(obj)
        oid = digest(record)
        if persist:
            self.persist(self.path_for(oid), record)
        return oid

    def read_record(self, oid: str) -> bytes:
        p = self.path_for(oid)
        try:
            raw = p.read_bytes()
        except OSError as err:
            raise ObjectNotFoundError(f'object {oid} not found or unreadable: {err.strerror}') from err
        return compression.decompress(raw)

    def read_object(self, oid: str, verify: bool = False) -> Object:
        record = self.read_record(oid)
        if verify:
            actual = digest(record)
            if actual != oid:
                raise DigestMismatchError(f'object {oid} hashes to {actual}')
        logger.debug('read %s (%d bytes)', oid[:8], len(record))
        return parse_record(record)
