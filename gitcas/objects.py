"""Blob and tree objects, their records, and content addressing.

Every object is stored as a record::

    <type> SP <decimal content length> NUL <content>

and is identified by the SHA-1 of that record. The digest is always derived
from the current content and never kept on the object.
"""
import hashlib
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .errors import (InvalidEncodingError, InvalidSizeError, MalformedRecordError,
                     NotATreeError, UnrecognizedTypeError)
from .tree import TreeEntry, parse_tree, serialize_tree

BLOB = 'blob'
TREE = 'tree'


@dataclass(frozen=True)
class Blob:
    data: bytes


@dataclass(frozen=True)
class Tree:
    entries: Tuple[TreeEntry, ...] = ()

    @classmethod
    def of(cls, entries: Iterable[TreeEntry]) -> 'Tree':
        return cls(tuple(entries))


Object = Union[Blob, Tree]


def _unknown(obj) -> TypeError:
    return TypeError(f'not a blob or tree: {type(obj).__name__}')


def type_tag(obj: Object) -> str:
    if isinstance(obj, Blob):
        return BLOB
    if isinstance(obj, Tree):
        return TREE
    raise _unknown(obj)


def decode(body: bytes, tag: str) -> Object:
    """Build the object for a record's content region and type tag."""
    if tag == BLOB:
        return Blob(body)
    if tag == TREE:
        return Tree(parse_tree(body))
    raise UnrecognizedTypeError(f'object type not recognized: {tag!r}')


def serialize(obj: Object) -> bytes:
    if isinstance(obj, Blob):
        return obj.data
    if isinstance(obj, Tree):
        return serialize_tree(obj.entries)
    raise _unknown(obj)


def render(obj: Object) -> str:
    """Text shown by ``cat-file -p``.

    Blobs are decoded as UTF-8; binary blobs raise InvalidEncodingError.
    Trees give one ``<mode> <type> <hex id> <name>`` line per entry.
    """
    if isinstance(obj, Blob):
        try:
            return obj.data.decode('utf-8')
        except UnicodeDecodeError as err:
            raise InvalidEncodingError(f'error decoding blob content: {err}') from err
    if isinstance(obj, Tree):
        return ''.join(f'{e.mode.value} {e.object_type} {e.hex_id} {e.display_name}\n'
                       for e in obj.entries)
    raise _unknown(obj)


def names_only(obj: Object) -> str:
    if isinstance(obj, Tree):
        return ''.join(f'{e.display_name}\n' for e in obj.entries)
    if isinstance(obj, Blob):
        raise NotATreeError('not a tree object')
    raise _unknown(obj)


def build_record(obj: Object) -> bytes:
    content = serialize(obj)
    return f'{type_tag(obj)} {len(content)}\0'.encode('ascii') + content


def parse_record(record: bytes) -> Object:
    nul = record.find(b'\0')
    if nul == -1:
        raise MalformedRecordError('not a valid object record: no header terminator')
    header, content = record[:nul], record[nul + 1:]
    tag, _, size = header.partition(b' ')
    # bytes.isdigit is ASCII only, so signs, spaces and non-ASCII digits are rejected
    if not size.isdigit():
        raise InvalidSizeError(f'error parsing object size: {size!r}')
    try:
        declared = int(size)
    except ValueError as err:
        raise InvalidSizeError(f'error parsing object size: {len(size)} digit header') from err
    if declared != len(content):
        raise InvalidSizeError(
            f'object size mismatch: header says {declared}, content is {len(content)} bytes')
    return decode(content, tag.decode('ascii', 'replace'))


def digest(record: bytes) -> str:
    return hashlib.sha1(record).hexdigest()


def object_id(obj: Object) -> str:
    return digest(build_record(obj))
