from __future__ import annotations

from inistore.tokenizer import LineKind, classify, tokenize


def test_tokenize_classifies_each_line_kind():
    text = "; comment\n\n[Server]\nPort=8080\n"
    kinds = [line.kind for line in tokenize(text)]
    assert kinds == [LineKind.COMMENT, LineKind.BLANK, LineKind.SECTION, LineKind.ENTRY]


def test_section_header_name_is_trimmed():
    line = classify("  [  My Section ]  ")
    assert line is not None
    assert line.kind is LineKind.SECTION
    assert line.name == "My Section"


def test_entry_key_trimmed_value_verbatim():
    line = classify("  Key  = some value  ")
    assert line is not None
    assert line.kind is LineKind.ENTRY
    assert line.key == "Key"
    assert line.value == " some value  "


def test_entry_splits_on_first_equals_only():
    line = classify("url=http://x?a=b")
    assert line is not None
    assert (line.key, line.value) == ("url", "http://x?a=b")


def test_entry_with_empty_value():
    line = classify("Empty=")
    assert line is not None
    assert (line.key, line.value) == ("Empty", "")


def test_malformed_lines_are_skipped():
    text = "just some words\n=no key\n   =\n[Ok]\nk=v\n"
    lines = list(tokenize(text))
    assert [line.kind for line in lines] == [LineKind.SECTION, LineKind.ENTRY]
    assert lines[0].lineno == 4


def test_hash_is_not_a_comment_marker():
    line = classify("#not=comment")
    assert line is not None
    assert line.kind is LineKind.ENTRY
    assert line.key == "#not"


def test_universal_newlines():
    text = "[A]\r\nk1=v1\rk2=v2\nk3=v3"
    values = [line.value for line in tokenize(text) if line.kind is LineKind.ENTRY]
    assert values == ["v1", "v2", "v3"]


def test_tokenize_is_lazy():
    it = tokenize("[A]\nk=v\n")
    assert iter(it) is it
    assert next(it).kind is LineKind.SECTION
