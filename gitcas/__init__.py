"""Content-addressable store for git blob and tree objects."""
from .errors import ObjectError
from .objects import Blob, Tree, build_record, decode, digest, names_only, parse_record, render, type_tag
from .store import ObjectStore
from .tree import Mode, TreeEntry, parse_tree, serialize_tree

__version__ = '0.1.0'
