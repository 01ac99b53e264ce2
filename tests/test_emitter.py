import io
from textwrap import dedent

from yamltree.emitter import dump, iter_display_lines, print_tree
from yamltree.nodes import MapNode, ScalarNode, SequenceNode, from_python, to_python
from yamltree.parser import parse_document

COMPLEX = dedent("""\
    # service definition
    name: demo
    server:
      host: localhost
      port: 8080
      limits:
        cpu: 2
        memory: 512Mi
    tags:
      - a
      - b
    users:
      - name: Alice
        roles:
          - admin
          - dev
      - name: Bob
        profile:
          shell: zsh
    steps:
      - run: |
          make
          make test
        name: build
      - |
        literal item

        after blank
    matrix:
      -
        - 1
        - 2
      -
        - 3
    banner: >
      folded
      text
    empty:
    last: done
""")


def test_dump_layout_with_section_separators():
    root = parse_document("name: demo\nserver:\n  host: localhost\n  port: 8080\ntags:\n  - a\n  - b\n")
    assert dump(root) == (
        "name: demo\n"
        "server:\n"
        "  host: localhost\n"
        "  port: 8080\n"
        "\n"
        "tags:\n"
        "  - a\n"
        "  - b\n"
        "\n"
        "\n"
    )


def test_dump_sequence_of_maps():
    root = from_python({"users": [{"name": "Alice", "age": 30}]})
    assert dump(root) == "users:\n  -\n    name: Alice\n    age: 30\n\n\n"


def test_dump_block_markers():
    root = MapNode({
        "motd": ScalarNode("line1\n\nline3", "literal"),
        "note": ScalarNode("folded", "folded"),
    })
    assert dump(root) == "motd: |\n  line1\n\n  line3\nnote: >\n  folded\n\n"


def test_dump_empty_values():
    root = MapNode({
        "empty": ScalarNode(""),
        "items": SequenceNode([ScalarNode(""), ScalarNode("x")]),
    })
    assert dump(root) == 'empty:\nitems:\n  - ""\n  - x\n\n\n'


def test_multiline_plain_scalar_is_written_as_literal_block():
    root = MapNode({"text": ScalarNode("a\nb")})
    assert dump(root) == "text: |\n  a\n  b\n\n"
    assert parse_document(dump(root)).entries["text"].text == "a\nb"


def test_round_trip_is_structurally_stable():
    first = parse_document(COMPLEX)
    second = parse_document(dump(first))
    assert second == first
    assert to_python(second)["steps"][1] == "literal item\n\nafter blank"
    assert second.entries["banner"].style == "folded"
    # a second pass produces identical text
    assert dump(second) == dump(first)


def test_round_trip_of_python_data():
    data = {
        "name": "svc",
        "nested": {"list": ["x", {"k": "v"}, ["deep"]], "flag": True},
        "count": 3,
        "text": "one\ntwo",
    }
    root = parse_document(dump(from_python(data)))
    assert to_python(root) == {
        "name": "svc",
        "nested": {"list": ["x", {"k": "v"}, ["deep"]], "flag": "true"},
        "count": "3",
        "text": "one\ntwo",
    }


def test_display_lines():
    root = parse_document(dedent("""\
        users:
          - name: Alice
            age: 30
        grid:
          -
            - 1
        title: x
    """))
    assert list(iter_display_lines(root)) == [
        "users:",
        "  -",
        "    name: Alice",
        "    age: 30",
        "grid:",
        "  -",
        "    - 1",
        "title: x",
    ]


def test_print_tree_writes_to_stream():
    out = io.StringIO()
    print_tree(parse_document("a:\n  b: 1\n"), out)
    assert out.getvalue() == "a:\n  b: 1\n"
