#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the document-level unwrap transform."""

import copy
import json

import pytest
from utils import image, para, raw_html, space, text

from paraunwrap import unwrap_json
from paraunwrap.ast import (
    Attributes,
    BlockQuote,
    Div,
    Document,
    Figure,
    Image,
    OpaqueNode,
    Paragraph,
    RawBlock,
    SoftBreak,
    Space,
    Text,
)
from paraunwrap.ast.transforms import NodeTransformer
from paraunwrap.exceptions import ParsingError
from paraunwrap.options import UnwrapOptions
from paraunwrap.transforms.unwrap import UnwrapTransform, unwrap_document, walk_blocks

EMPHASIS = {"t": "Emph", "c": [{"t": "Str", "c": "x"}]}


def _cat_image() -> Image:
    return Image(attr=Attributes("fig1", ["center"], []), alt=[Text("cat")], url="a.png")


@pytest.mark.unit
class TestWalkBlocks:
    """Test block sequence rewriting."""

    def test_angle_rule(self) -> None:
        result = walk_blocks([Paragraph(content=[Text("< hello")])])
        assert result == [RawBlock(format="html", content="< hello")]

    def test_plain_paragraph_unchanged(self) -> None:
        paragraph = Paragraph(content=[Text("hello")])
        result = walk_blocks([paragraph])
        assert result[0] is paragraph

    def test_image_rule(self) -> None:
        result = walk_blocks([Paragraph(content=[_cat_image()])])
        assert result == [RawBlock(format="html", content='<img src="a.png" alt="cat" id="fig1" class="center" />')]

    def test_angle_and_image_gives_bare_img(self) -> None:
        result = walk_blocks([Paragraph(content=[Text("<"), Space(), _cat_image()])])
        assert result == [RawBlock(format="html", content='<img src="a.png" alt="cat" id="fig1" class="center" />')]

    def test_fail_safe_flattening(self) -> None:
        paragraph = Paragraph(content=[Text("< "), Text("x"), OpaqueNode(raw=EMPHASIS)])
        result = walk_blocks([paragraph])
        assert result[0] is paragraph

    def test_space_keeps_angle_paragraph(self) -> None:
        paragraph = Paragraph(content=[Text("<div"), Space(), Text("x>")])
        result = walk_blocks([paragraph])
        assert result[0] is paragraph

    def test_image_with_text_is_not_unwrapped(self) -> None:
        paragraph = Paragraph(content=[Text("see"), Space(), Image(url="a.png")])
        assert walk_blocks([paragraph])[0] is paragraph

    def test_sibling_order_and_length_preserved(self) -> None:
        blocks = [
            OpaqueNode(raw={"t": "HorizontalRule"}),
            Paragraph(content=[Text("<br>")]),
            Paragraph(content=[Text("text")]),
            Paragraph(content=[Image(url="a.png")]),
            RawBlock(format="latex", content="\\newpage"),
        ]
        result = walk_blocks(blocks)

        assert len(result) == len(blocks)
        assert result[0] is blocks[0]
        assert result[1] == RawBlock(format="html", content="<br>")
        assert result[2] is blocks[2]
        assert result[3] == RawBlock(format="html", content='<img src="a.png" />')
        assert result[4] is blocks[4]

    def test_unknown_node_passthrough(self) -> None:
        unknown = OpaqueNode(raw={"t": "BulletList", "c": [[{"t": "Para", "c": [{"t": "Str", "c": "<x"}]}]]})
        original = copy.deepcopy(unknown.raw)

        result = walk_blocks([unknown])

        assert result[0] is unknown
        assert unknown.raw == original


@pytest.mark.unit
class TestContainerRecursion:
    """Test descent into block quotes, divs and figures."""

    def test_block_quote_keeps_wrapper(self) -> None:
        quote = BlockQuote(children=[Paragraph(content=[Text("< hello")])])
        result = walk_blocks([quote])

        assert result[0] is quote
        assert quote.children == [RawBlock(format="html", content="< hello")]

    def test_div_attributes_untouched(self) -> None:
        attr = Attributes("box", ["wide"], [("data-x", "1")])
        div = Div(attr=attr, children=[Paragraph(content=[Image(url="a.png")]), Paragraph(content=[Text("x")])])

        walk_blocks([div])

        assert div.attr == Attributes("box", ["wide"], [("data-x", "1")])
        assert div.children[0] == RawBlock(format="html", content='<img src="a.png" />')
        assert div.children[1] == Paragraph(content=[Text("x")])

    def test_figure_caption_untouched(self) -> None:
        caption = [None, [{"t": "Plain", "c": [{"t": "Str", "c": "<caption"}]}]]
        figure = Figure(attr=Attributes("f"), caption=copy.deepcopy(caption), children=[Paragraph(content=[Image(url="a.png")])])

        walk_blocks([figure])

        assert figure.caption == caption
        assert figure.children == [RawBlock(format="html", content='<img src="a.png" />')]

    def test_nested_containers(self) -> None:
        inner = Div(children=[Paragraph(content=[Text("<hr>")])])
        outer = BlockQuote(children=[inner, Paragraph(content=[Text("quoted")])])

        walk_blocks([outer])

        assert outer.children[0] is inner
        assert inner.children == [RawBlock(format="html", content="<hr>")]
        assert outer.children[1] == Paragraph(content=[Text("quoted")])

    def test_empty_container(self) -> None:
        quote = BlockQuote(children=[])
        assert walk_blocks([quote]) == [BlockQuote(children=[])]


@pytest.mark.unit
class TestUnwrapOptions:
    """Test option-driven behavior of the transform."""

    def test_angle_rewrite_disabled(self) -> None:
        paragraph = Paragraph(content=[Text("<hr>")])
        result = walk_blocks([paragraph], UnwrapOptions(unwrap_angle_paragraphs=False))
        assert result[0] is paragraph

    def test_image_rewrite_disabled(self) -> None:
        paragraph = Paragraph(content=[Image(url="a.png")])
        result = walk_blocks([paragraph], UnwrapOptions(unwrap_image_paragraphs=False))
        assert result[0] is paragraph

    def test_angle_image_still_unwrapped_when_image_rule_disabled(self) -> None:
        """The angle rule owns the ``< ![](img)`` case."""
        paragraph = Paragraph(content=[Text("<"), Space(), Image(url="a.png")])
        result = walk_blocks([paragraph], UnwrapOptions(unwrap_image_paragraphs=False))
        assert result == [RawBlock(format="html", content='<img src="a.png" />')]

    def test_require_space(self) -> None:
        options = UnwrapOptions(require_space_after_angle=True)
        tag = Paragraph(content=[Text("<div>")])
        spaced = Paragraph(content=[Text("< div")])
        split = Paragraph(content=[Text("<"), Space(), Text("div")])

        result = walk_blocks([tag, spaced, split], options)

        assert result[0] is tag
        assert result[1] == RawBlock(format="html", content="< div")
        assert result[2] is split

    def test_raw_format(self) -> None:
        result = walk_blocks([Paragraph(content=[Text("<x>")])], UnwrapOptions(raw_format="html5"))
        assert result == [RawBlock(format="html5", content="<x>")]


@pytest.mark.unit
class TestUnwrapDocument:
    """Test whole-document behavior."""

    def test_returns_same_document(self) -> None:
        doc = Document(blocks=[Paragraph(content=[Text("< hello")])])
        assert unwrap_document(doc) is doc
        assert doc.blocks == [RawBlock(format="html", content="< hello")]

    def test_metadata_untouched(self) -> None:
        meta = {"title": {"t": "MetaInlines", "c": [{"t": "Str", "c": "<T>"}]}}
        doc = Document(blocks=[], meta=copy.deepcopy(meta))
        unwrap_document(doc)
        assert doc.meta == meta

    def test_document_without_blocks(self) -> None:
        doc = Document(blocks=None, meta={"a": 1})
        assert unwrap_document(doc) is doc
        assert doc.blocks is None

    def test_rewrite_counters(self) -> None:
        doc = Document(
            blocks=[
                Paragraph(content=[Text("<a>")]),
                BlockQuote(children=[Paragraph(content=[Image(url="a.png")])]),
                Paragraph(content=[Text("<"), Text("x"), OpaqueNode(raw=EMPHASIS)]),
            ]
        )
        transform = UnwrapTransform()
        transform.transform_document(doc)

        assert transform.angle_rewrites == 1
        assert transform.image_rewrites == 1

    def test_idempotent(self) -> None:
        doc = Document(
            blocks=[
                Paragraph(content=[Text("<p>"), SoftBreak(), Text("</p>")]),
                Div(children=[Paragraph(content=[Image(url="a.png"), Space()])]),
                Paragraph(content=[Text("text")]),
            ]
        )
        once = unwrap_document(copy.deepcopy(doc))
        twice = unwrap_document(unwrap_document(copy.deepcopy(doc)))
        assert once == twice


@pytest.mark.integration
class TestUnwrapJson:
    """Test the JSON-in, JSON-out pipeline."""

    def test_sample_document(self, sample_pandoc_document) -> None:
        result = json.loads(unwrap_json(json.dumps(sample_pandoc_document)))
        blocks = result["blocks"]

        assert result["meta"] == sample_pandoc_document["meta"]
        assert result["pandoc-api-version"] == [1, 23, 1]
        assert blocks[0] == sample_pandoc_document["blocks"][0]
        assert blocks[1] == sample_pandoc_document["blocks"][1]
        assert blocks[2] == raw_html('<img src="a.png" alt="cat" id="fig1" class="center" />')
        assert blocks[3] == {"t": "BlockQuote", "c": [raw_html("<hr>"), para(text("quoted"))]}
        assert blocks[4] == {"t": "Div", "c": [["box", ["wide"], [["data-x", "1"]]], [raw_html('<img src="b.png" />')]]}
        assert blocks[5] == sample_pandoc_document["blocks"][5]

    def test_untouched_document_is_byte_identical(self, pandoc_json) -> None:
        payload = pandoc_json(
            para(text("hello"), space(), image("a.png")),
            {"t": "CodeBlock", "c": [["", [], []], "<not raw>"]},
            {"t": "Weird", "c": {"z": 1, "a": [1, 2.5, "é"]}, "extra": True},
        )
        assert unwrap_json(payload) == payload

    def test_member_order_does_not_matter(self) -> None:
        payload = '{"blocks":[{"c":[{"t":"Str","c":"<hr>"}],"t":"Para"}],"meta":{}}'
        result = json.loads(unwrap_json(payload))
        assert result["blocks"] == [raw_html("<hr>")]

    def test_bytes_input(self, pandoc_json) -> None:
        payload = pandoc_json(para(text("<hr>")))
        result = json.loads(unwrap_json(payload.encode("utf-8")))
        assert result["blocks"] == [raw_html("<hr>")]

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ParsingError):
            unwrap_json("{not json")


@pytest.mark.unit
class TestNodeTransformer:
    """Test the pass-through defaults of the base transformer."""

    @pytest.mark.parametrize(
        "node",
        [Text("<x"), Space(), SoftBreak(), Image(url="a.png"), OpaqueNode(raw={"t": "Emph", "c": []})],
    )
    def test_single_node_returned_as_is(self, node) -> None:
        assert NodeTransformer().transform(node) is node

    def test_inline_children_not_visited(self) -> None:
        class Shout(NodeTransformer):
            def visit_text(self, node):
                return Text(node.content.upper())

        paragraph = Paragraph(content=[Text("quiet")])
        doc = Shout().transform_document(Document(blocks=[paragraph]))

        assert doc.blocks == [Paragraph(content=[Text("quiet")])]
