import json

import pytest

from md_blocks import parse
from md_blocks.models import Code, Heading, ThematicBreak
from md_blocks.serialization import block_from_dict, from_json, to_dict, to_json

SAMPLE = '# Title\n\nText\n\n---\n```py\nprint(1)\n```\n[Ref]: /x "T"\n'


def test_to_dict_shape():
    data = to_dict(parse(SAMPLE))

    assert data == {
        "blocks": [
            {"type": "heading", "level": 1, "text": "Title"},
            {"type": "paragraph", "text": "Text"},
            {"type": "thematic_break"},
            {"type": "code", "language": "py", "content": "print(1)\n"},
        ],
        "link_definitions": {"ref": {"destination": "/x", "title": "T"}},
    }


def test_to_dict_without_links():
    assert "link_definitions" not in to_dict(parse(SAMPLE), include_links=False)


def test_to_json_is_deterministic_and_sorted():
    document = parse(SAMPLE)

    first = to_json(document)
    assert first == to_json(parse(SAMPLE))
    assert list(json.loads(first)) == ["blocks", "link_definitions"]


def test_json_round_trip():
    document = parse(SAMPLE)

    assert from_json(to_json(document)) == document


def test_block_from_dict():
    assert block_from_dict({"type": "heading", "level": 2, "text": "x"}) == Heading(2, "x")
    assert block_from_dict({"type": "thematic_break"}) == ThematicBreak()
    assert block_from_dict({"type": "code", "language": None, "content": ""}) == Code(None, "")


@pytest.mark.parametrize("data", [{}, {"type": "table"}])
def test_block_from_dict_rejects_unknown(data):
    with pytest.raises(ValueError):
        block_from_dict(data)
