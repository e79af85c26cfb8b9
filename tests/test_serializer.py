from __future__ import annotations

from inistore.model import Document
from inistore.parser import parse
from inistore.serializer import render


def test_render_canonical_layout():
    doc = Document()
    doc.set("top", "1")
    doc.set("Key", "Value", "SectionName")
    doc.set("AnotherKey", "AnotherValue", "SectionName")
    doc.set("Key2", "Value2", "OtherSection")

    assert render(doc) == (
        "top=1\n"
        "\n"
        "[SectionName]\n"
        "Key=Value\n"
        "AnotherKey=AnotherValue\n"
        "\n"
        "[OtherSection]\n"
        "Key2=Value2\n"
    )


def test_render_without_global_entries_has_no_leading_blank():
    doc = Document()
    doc.set("k", "v", "A")
    assert render(doc) == "[A]\nk=v\n"


def test_render_empty_document():
    assert render(Document()) == ""


def test_render_keeps_empty_named_section():
    doc = Document()
    doc.set("k", "v", "A")
    doc.delete_key("k", "A")
    assert render(doc) == "[A]\n"


def test_render_crlf_without_trailing_newline():
    doc = Document()
    doc.set("a", "1", "S")
    doc.set("b", "2", "S")
    assert render(doc, newline="\r\n", trailing_newline=False) == "[S]\r\na=1\r\nb=2"


def test_parse_render_preserves_content():
    text = "g=0\n; dropped\n[A]\nx= spaced \ny=\n\n[B]\nz=1\n"
    doc = parse(text)
    assert parse(render(doc)).to_disk_doc() == doc.to_disk_doc()
    assert doc.get("x", "A") == " spaced "
