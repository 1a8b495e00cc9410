import pytest

from ninjascript_checker.utils import (
    PHASE_BAR_UPDATE,
    PHASE_CONFIGURE,
    PHASE_DATA_LOADED,
    SourceIndex,
    find_matching_brace,
    sanitize,
)

from samples import CLEAN_INDICATOR


@pytest.mark.parametrize("code", [
    "",
    'Print("unterminated',
    "/* never closed\n{ {",
    'var s = @"multi\nline ""quoted"" {";\n}',
    "char c = '{'; // {\r\nint x = 1;\r\n",
    'var t = $"tag{CurrentBar}" + "\\"";',
    "string s = \"ends with backslash\\\n{",
    CLEAN_INDICATOR,
])
def test_sanitize_keeps_length_and_line_breaks(code):
    out = sanitize(code)
    assert len(out) == len(code)
    assert [i for i, ch in enumerate(out) if ch == "\n"] == [i for i, ch in enumerate(code) if ch == "\n"]
    assert [i for i, ch in enumerate(out) if ch == "\r"] == [i for i, ch in enumerate(code) if ch == "\r"]


def test_sanitize_blanks_comments_and_literals():
    code = 'x = "{"; // }\ny = \'(\'; /* [ */ z = @"a""]"; w = $"{a}";'
    out = sanitize(code)
    assert not any(ch in out for ch in "{}()[]")
    assert out.split("\n")[0].rstrip() == "x =    ;"
    assert "z =" in out and "w =" in out


def test_sanitize_leaves_code_untouched():
    code = "if (Close[0] > Open[0]) { x = y / 2 * 3; }"
    assert sanitize(code) == code


def test_sanitize_escaped_quote_does_not_end_string():
    code = 'a = "say \\"hi\\" {"; b = 1;'
    out = sanitize(code)
    assert "{" not in out
    assert out.endswith("b = 1;")


def test_sanitize_unterminated_string_stops_at_line_end():
    out = sanitize('a = "open\nb = 1;')
    assert out.split("\n")[1] == "b = 1;"


def test_source_index_rejects_non_string():
    with pytest.raises(TypeError):
        SourceIndex(None)
    with pytest.raises(TypeError):
        SourceIndex(b"namespace X {}")


def test_line_of_and_line_start():
    source = SourceIndex("a\nbb\nccc")
    assert source.line_count == 3
    assert source.line_of(0) == 1
    assert source.line_of(1) == 1
    assert source.line_of(2) == 2
    assert source.line_of(5) == 3
    assert source.line_start(1) == 0
    assert source.line_start(3) == 5


def test_phase_at_follows_last_marker():
    source = SourceIndex(CLEAN_INDICATOR)
    code = CLEAN_INDICATOR
    assert source.phase_at(0) is None
    assert source.phase_at(code.index("fastSma = SMA(")) == PHASE_DATA_LOADED
    assert source.phase_at(code.index("Draw.ArrowUp")) == PHASE_BAR_UPDATE
    configure = code.index("State == State.Configure")
    assert source.phase_at(configure + len("State == State.Configure")) == PHASE_CONFIGURE


def test_method_body_spans_braces():
    source = SourceIndex(CLEAN_INDICATOR)
    start, end = source.method_body("OnBarUpdate")
    body = CLEAN_INDICATOR[start:end + 1]
    assert body.startswith("{") and body.endswith("}")
    assert "Draw.TextFixed" in body
    assert source.method_body("OnRender") is None


def test_find_matching_brace_unclosed():
    text = "{ { }"
    assert find_matching_brace(text, 0) == len(text)
    assert find_matching_brace(text, 2) == 4
