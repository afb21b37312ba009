"""Repository operations behind the command line (init, hash-object, cat-file, ls-tree)."""
import logging
from pathlib import Path

from .errors import NotATreeError, ObjectNotFoundError
from .objects import Blob, Tree, names_only, render
from .store import ObjectStore

logger = logging.getLogger(__name__)

GIT_DIR = '.git'
DEFAULT_BRANCH = 'main'


class Repo:
    def __init__(self, path: str = '.', git_dir: str = GIT_DIR):
        self.workdir = Path(path).resolve()
        self.git_dir = self.workdir / git_dir
        self.objects = ObjectStore(self.git_dir)

    def init(self) -> Path:
        (self.git_dir / 'objects').mkdir(parents=True, exist_ok=True)
        (self.git_dir / 'refs' / 'heads').mkdir(parents=True, exist_ok=True)
        (self.git_dir / 'refs' / 'tags').mkdir(parents=True, exist_ok=True)
        head = self.git_dir / 'HEAD'
        if not head.exists():
            head.write_text(f'ref: refs/heads/{DEFAULT_BRANCH}\n')
        logger.debug('initialized repository in %s', self.git_dir)
        return self.git_dir

    def hash_object(self, path: str, write: bool = False) -> str:
        p = self.workdir / path
        try:
            data = p.read_bytes()
        except OSError as err:
            raise ObjectNotFoundError(f'cannot read {path}: {err.strerror}') from err
        return self.objects.write_object(Blob(data), persist=write)

    def cat_file(self, oid: str) -> str:
        return render(self.objects.read_object(oid))

    def ls_tree(self, oid: str, name_only: bool = False) -> str:
        obj = self.objects.read_object(oid)
        if not isinstance(obj, Tree):
            raise NotATreeError(f'not a tree object: {oid}')
        return names_only(obj) if name_only else render(obj)
