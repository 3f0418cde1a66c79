"""Tests for CSVHandler and encoding detection."""

from __future__ import annotations

from pathlib import Path

from csvtable.core.functions.encoding import EncodingConfig
from csvtable.core.processor import CSVHandler
from csvtable.core.processor.csv_helper import CSVEncoder, detect_bom


def test_detect_bom() -> None:
    assert detect_bom(b"\xef\xbb\xbfa,b") == "utf-8-sig"
    assert detect_bom(b"\xff\xfea\x00") == "utf-16-le"
    assert detect_bom(b"a,b") is None


def test_decode_prefers_configured_encoding() -> None:
    encoder = CSVEncoder(EncodingConfig(preferred_encoding="cp1252", use_chardet=False))
    text, encoding = encoder.decode(b"caf\xe9")
    assert text == "café"
    assert encoding == "cp1252"


def test_decode_falls_back_through_candidates() -> None:
    encoder = CSVEncoder(EncodingConfig(use_chardet=False, encoding_candidates=["ascii", "latin-1"]))
    text, encoding = encoder.decode(b"\xe9t\xe9")
    assert text == "été"
    assert encoding == "latin-1"


def test_decode_uses_fallback_when_candidates_fail() -> None:
    encoder = CSVEncoder(EncodingConfig(use_chardet=False, encoding_candidates=["ascii"]))
    _, encoding = encoder.decode(b"\xfe\xfd")
    assert encoding == "latin-1"


def test_read_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert CSVHandler().read(tmp_path / "nope.csv", ",") is None


def test_read_reports_encoding_and_rows(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_bytes(b"#skip\na,b\n")

    loaded = CSVHandler().read(path, ",", "#")
    assert loaded is not None
    assert loaded.rows == [["a", "b"]]
    assert loaded.encoding
    assert loaded.file_path == str(path)


def test_read_with_bad_explicit_encoding_fails(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_bytes(b"\xe9")
    assert CSVHandler().read(path, ",", encoding="ascii") is None


def test_render_terminates_every_row() -> None:
    handler = CSVHandler()
    assert handler.render([["a", "b"], [""]], ",") == "a,b\n\n"
    assert handler.render([], ",") == ""


def test_write_unencodable_text_fails(tmp_path: Path) -> None:
    target = tmp_path / "out.csv"
    assert CSVHandler().write(target, [["☃"]], ",", encoding="ascii") is False
    assert not target.exists()


def test_write_uses_save_encoding(tmp_path: Path) -> None:
    target = tmp_path / "out.csv"
    handler = CSVHandler(EncodingConfig(save_encoding="utf-16"))
    assert handler.write(target, [["x"]], ",")
    assert target.read_bytes().decode("utf-16") == "x\n"
