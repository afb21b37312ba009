"""Command-line interface for gitcas"""
import argparse, logging, os, sys

from .errors import ObjectError
from .repo import GIT_DIR, Repo

FATAL_STATUS = 128


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gitcas')
    parser.add_argument('--git-dir', default=os.environ.get('GIT_DIR') or GIT_DIR)
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='cmd')

    sub.add_parser('init')

    p_hash = sub.add_parser('hash-object'); p_hash.add_argument('-w', action='store_true', dest='write'); p_hash.add_argument('file')

    p_cat = sub.add_parser('cat-file'); p_cat.add_argument('-p', action='store_true', dest='pretty', required=True); p_cat.add_argument('object')

    p_ls = sub.add_parser('ls-tree'); p_ls.add_argument('--name-only', action='store_true'); p_ls.add_argument('tree')

    return parser


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    repo = Repo('.', git_dir=args.git_dir)

    try:
        if args.cmd == 'init':
            print(f'Initialized empty repository in {repo.init()}'); return 0
        if args.cmd == 'hash-object':
            print(repo.hash_object(args.file, write=args.write)); return 0
        if args.cmd == 'cat-file':
            sys.stdout.write(repo.cat_file(args.object)); return 0
        if args.cmd == 'ls-tree':
            sys.stdout.write(repo.ls_tree(args.tree, name_only=args.name_only)); return 0
    except ObjectError as err:
        print(f'fatal: {err}', file=sys.stderr)
        return FATAL_STATUS

    parser.print_help(); return 2

if __name__ == '__main__':
    raise SystemExit(main())
