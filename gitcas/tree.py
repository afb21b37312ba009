"""Binary codec for tree bodies.

A tree body is a run of entries with no separator between them::

    <mode> SP <name> NUL <20 byte binary digest>

The mode and name are delimited text, the child id is fixed width binary, so
parsing walks a byte cursor and derives each field boundary from the previous
one.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .errors import (EmptyNameError, InvalidModeError, InvalidNameError,
                     TruncatedDigestError, UnrecognizedModeError)

RAW_DIGEST_LENGTH = 20
# names are bytes on disk; surrogateescape keeps non UTF-8 names byte-exact
NAME_ENCODING = 'utf-8'
NAME_ERRORS = 'surrogateescape'


class Mode(Enum):
    REGULAR_FILE = '100644'
    EXECUTABLE_FILE = '100755'
    SYMBOLIC_LINK = '120000'
    DIRECTORY = '040000'

    @classmethod
    def from_token(cls, token: bytes) -> 'Mode':
        try:
            return cls(token.decode('ascii'))
        except (UnicodeDecodeError, ValueError) as err:
            raise UnrecognizedModeError(
                f'tree entry mode not recognized: {token!r}') from err

    @property
    def object_type(self) -> str:
        return 'tree' if self is Mode.DIRECTORY else 'blob'


@dataclass(frozen=True)
class TreeEntry:
    mode: Mode
    name: str
    child_id: bytes

    def __post_init__(self):
        if not self.name:
            raise EmptyNameError('tree entry name is empty')
        if '\0' in self.name or '/' in self.name:
            raise InvalidNameError(
                f'tree entry name must be a single path component: {self.name!r}')
        if len(self.child_id) != RAW_DIGEST_LENGTH:
            raise TruncatedDigestError(
                f'tree entry id must be {RAW_DIGEST_LENGTH} bytes, got {len(self.child_id)}')

    @classmethod
    def from_hex(cls, mode: Mode, name: str, hex_id: str) -> 'TreeEntry':
        try:
            child_id = bytes.fromhex(hex_id)
        except ValueError as err:
            raise TruncatedDigestError(f'tree entry id is not hex: {hex_id!r}') from err
        return cls(mode, name, child_id)

    @property
    def hex_id(self) -> str:
        return self.child_id.hex()

    @property
    def display_name(self) -> str:
        """Name for text output; undecodable bytes become U+FFFD."""
        return self.name.encode(NAME_ENCODING, NAME_ERRORS).decode(NAME_ENCODING, 'replace')

    @property
    def object_type(self) -> str:
        return self.mode.object_type


def parse_tree(body: bytes) -> Tuple[TreeEntry, ...]:
    entries: List[TreeEntry] = []
    pos = 0
    end = len(body)
    while pos < end:
        space = body.find(b' ', pos)
        if space == -1:
            raise InvalidModeError(f'tree entry at offset {pos} has no mode terminator')
        mode = Mode.from_token(body[pos:space])

        name_start = space + 1
        nul = body.find(b'\0', name_start)
        if nul == -1:
            raise InvalidNameError(f'tree entry at offset {pos} has no name terminator')
        if nul == name_start:
            raise EmptyNameError(f'tree entry at offset {pos} has an empty name')
        name = body[name_start:nul].decode(NAME_ENCODING, NAME_ERRORS)

        id_start = nul + 1
        id_end = id_start + RAW_DIGEST_LENGTH
        if id_end > end:
            raise TruncatedDigestError(
                f'tree entry {name!r} has {end - id_start} id bytes, expected {RAW_DIGEST_LENGTH}')
        entries.append(TreeEntry(mode, name, body[id_start:id_end]))
        pos = id_end
    return tuple(entries)


def serialize_tree(entries: Iterable[TreeEntry]) -> bytes:
    return b''.join(
        e.mode.value.encode('ascii') + b' '
        + e.name.encode(NAME_ENCODING, NAME_ERRORS) + b'\0'
        + e.child_id
        for e in entries)
