import hashlib

import pytest

from gitcas.errors import (InvalidEncodingError, InvalidSizeError, MalformedRecordError,
                           NotATreeError, UnrecognizedModeError, UnrecognizedTypeError)
from gitcas.objects import (Blob, Tree, build_record, decode, digest, names_only, object_id,
                            parse_record, render, serialize, type_tag)
from gitcas.tree import Mode, TreeEntry, parse_tree

EMPTY_TREE = '4b825dc642cb6eb9a060e54bf8d69288fbee4904'
HELLO_BLOB = 'ce013625030ba8dba906f756967f9e9ca394464a'  # 'hello\n'


def test_digest_is_sha1_hex():
    assert digest(b'Hello, world!') == '943a702d06f34599aee1f8da8ef9f7296031d699'
    assert digest(b'Hello, world!') == digest(b'Hello, world!')
    assert digest(b'') == hashlib.sha1(b'').hexdigest()


def test_blob_record_and_id():
    blob = Blob(b'hello\n')
    assert build_record(blob) == b'blob 6\0hello\n'
    assert object_id(blob) == HELLO_BLOB


def test_empty_tree_id():
    assert build_record(Tree()) == b'tree 0\0'
    assert object_id(Tree()) == EMPTY_TREE


def test_tree_id_depends_on_entry_order():
    a = TreeEntry(Mode.REGULAR_FILE, 'a', bytes(20))
    b = TreeEntry(Mode.REGULAR_FILE, 'b', bytes([1] * 20))
    assert object_id(Tree.of([a, b])) != object_id(Tree.of([b, a]))


def test_parse_record_blob():
    obj = parse_record(b'blob 7\0content')
    assert obj == Blob(b'content')
    assert type_tag(obj) == 'blob'


def test_parse_record_tree():
    body = b'100644 file1.txt\0' + bytes(20)
    obj = parse_record(b'tree %d\0' % len(body) + body)
    assert isinstance(obj, Tree)
    assert obj.entries[0].name == 'file1.txt'


def test_parse_record_without_terminator():
    with pytest.raises(MalformedRecordError):
        parse_record(b'invalid')


@pytest.mark.parametrize('record', [
    b'blob invalid\0content',
    b'blob\0content',
    b'blob -7\0content',
    b'blob 123\0Hello, world!',
    b'blob ' + b'9' * 5000 + b'\0abc',
])
def test_parse_record_bad_size(record):
    with pytest.raises(InvalidSizeError):
        parse_record(record)


def test_parse_record_unknown_type():
    with pytest.raises(UnrecognizedTypeError):
        parse_record(b'commit 3\0abc')


def test_parse_record_tree_errors_propagate():
    body = b'999999 x\0' + bytes(20)
    with pytest.raises(UnrecognizedModeError):
        parse_record(b'tree %d\0' % len(body) + body)


def test_decode_unknown_tag():
    with pytest.raises(UnrecognizedTypeError):
        decode(b'', 'tag')


def test_record_round_trip():
    tree = Tree.of([TreeEntry(Mode.EXECUTABLE_FILE, 'run.sh', bytes(range(20)))])
    assert parse_record(build_record(tree)) == tree
    assert parse_record(build_record(Blob(b'\x00\xff'))) == Blob(b'\x00\xff')


def test_render_blob():
    assert render(Blob(b'Hello, world!')) == 'Hello, world!'


def test_render_binary_blob():
    with pytest.raises(InvalidEncodingError):
        render(Blob(b'\xff\xfe\x00'))


def test_render_tree():
    hex_id = 'abc1234567890abcdef1234567890abcdef12345'
    tree = Tree.of([TreeEntry.from_hex(Mode.REGULAR_FILE, 'file1.txt', hex_id)])
    assert render(tree) == f'100644 blob {hex_id} file1.txt\n'


def test_render_tree_directory_entry():
    tree = Tree.of([
        TreeEntry(Mode.DIRECTORY, 'dir', bytes([0x11] * 20)),
        TreeEntry(Mode.REGULAR_FILE, 'z.txt', bytes([0x22] * 20)),
    ])
    assert render(tree) == ('040000 tree ' + '11' * 20 + ' dir\n'
                            '100644 blob ' + '22' * 20 + ' z.txt\n')


def test_render_empty_tree():
    assert render(Tree()) == ''


def test_names_only():
    tree = Tree.of([
        TreeEntry(Mode.REGULAR_FILE, 'b', bytes(20)),
        TreeEntry(Mode.DIRECTORY, 'a', bytes(20)),
    ])
    assert names_only(tree) == 'b\na\n'


def test_names_only_on_blob():
    with pytest.raises(NotATreeError):
        names_only(Blob(b'x'))


def test_non_object_is_rejected():
    with pytest.raises(TypeError):
        type_tag('blob')
    with pytest.raises(TypeError):
        render(b'data')


def test_render_non_utf8_name():
    tree = Tree(parse_tree(b'100644 caf\xe9\0' + bytes(20)))
    assert render(tree) == '100644 blob ' + '00' * 20 + ' caf\ufffd\n'
    assert names_only(tree) == 'caf\ufffd\n'
    # the stored name is untouched
    assert serialize(tree) == b'100644 caf\xe9\0' + bytes(20)
