from movieprobe.common.strings.encoding import normalize_output


def test_normalize_output_utf8_passthrough():
    assert normalize_output("Café ☕".encode("utf-8")) == "Café ☕"


def test_normalize_output_invalid_utf8_falls_back_to_latin1():
    raw = b'{"title": "Caf\xe9 \xff"}'
    out = normalize_output(raw)
    assert isinstance(out, str)
    assert out == '{"title": "Café ÿ"}'


def test_normalize_output_no_trimming():
    assert normalize_output(b"  x\n") == "  x\n"


def test_normalize_output_str_input_untouched():
    assert normalize_output("already text") == "already text"


def test_normalize_output_empty():
    assert normalize_output(b"") == ""
