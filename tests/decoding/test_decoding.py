"""Tests for charset sniffing and strict decoding."""

import codecs

import pytest

from seriko import SerikoDecodeError, decode_bytes, parse_bytes, sniff_charset
from seriko.ast import Charset
from seriko.decoding import decode

SHIFT_JIS_SOURCE = (
    "charset,Shift_JIS\r\n"
    "// 表示テスト\r\n"
    "sakura.surface.alias\r\n"
    "{\r\n"
    "照れ,[1,101,201]\r\n"
    "}\r\n"
)


def test_utf8_buffer_round_trips() -> None:
    source = "charset,UTF-8\r\ndescript\r\n{\r\n}\r\n"
    assert decode_bytes(source.encode("utf-8")) == source


def test_shift_jis_buffer_decodes_to_original_text() -> None:
    data = SHIFT_JIS_SOURCE.encode("cp932")
    assert sniff_charset(data) is Charset.SHIFT_JIS
    assert decode_bytes(data) == SHIFT_JIS_SOURCE

    document = parse_bytes(data)
    assert document.charset is Charset.SHIFT_JIS
    assert document.header_comments == ()
    assert document.blocks[0].block.lines[0].value.name == "照れ"


def test_utf8_bytes_declared_shift_jis_fail() -> None:
    data = "charset,Shift_JIS\r\nあ".encode("utf-8")
    with pytest.raises(SerikoDecodeError) as exc_info:
        decode_bytes(data)
    assert exc_info.value.charset == "Shift_JIS"
    assert exc_info.value.code == "DECODE_ERROR"


def test_invalid_utf8_reports_byte_offset() -> None:
    data = b"charset,UTF-8\r\n\xff\xfe\r\n"
    with pytest.raises(SerikoDecodeError) as exc_info:
        decode_bytes(data)
    assert exc_info.value.position == len(b"charset,UTF-8\r\n")
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_ascii_declaration_decodes_as_utf8() -> None:
    source = "charset,ASCII\n// ü\n"
    assert decode_bytes(source.encode("utf-8")) == source


def test_charset_found_after_leading_comments() -> None:
    data = b"// made by hand\n\ncharset,UTF-8\n"
    assert sniff_charset(data) is Charset.UTF8


@pytest.mark.parametrize(
    "data",
    [b"", b"descript\r\n{\r\n}\r\n", b"charset,EUC-JP\r\n", b"{\r\ncharset,UTF-8\r\n"],
)
def test_missing_declaration(data: bytes) -> None:
    with pytest.raises(SerikoDecodeError):
        decode_bytes(data)


def test_utf8_bom_is_dropped() -> None:
    data = codecs.BOM_UTF8 + b"charset,UTF-8\n"
    assert sniff_charset(data) is Charset.UTF8
    assert decode_bytes(data) == "charset,UTF-8\n"


def test_utf8_bom_with_shift_jis_declaration_fails() -> None:
    data = codecs.BOM_UTF8 + "charset,Shift_JIS\n".encode("cp932")
    with pytest.raises(SerikoDecodeError) as exc_info:
        decode_bytes(data)
    assert exc_info.value.position == 0


def test_default_charset_decodes_as_utf8() -> None:
    assert decode("ü".encode("utf-8"), Charset.DEFAULT) == "ü"


def test_error_message_includes_path() -> None:
    with pytest.raises(SerikoDecodeError) as exc_info:
        decode_bytes(b"", path="ghost/shell/surfaces.txt")
    assert "ghost/shell/surfaces.txt" in str(exc_info.value)
