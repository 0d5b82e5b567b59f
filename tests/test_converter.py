import io

import pytest

from xyz2sgf.core.converter import (
    convert,
    convert_to_stream,
    decode_contents,
    file_to_converted_string,
    load,
    output_path,
    parse,
    save_file,
)
from xyz2sgf.core.errors import BadBoardSizeError, ParseError, UnknownFormatError
from xyz2sgf.core.formats import GameFormat
from tests.conftest import GIB_FIXTURE, NGF_FIXTURE, UGI_FIXTURE, move_count

GIB_SGF = (
    "(;PB[kim]BR[2D]PW[wildsim1]WR[2D]RE[W+R]KM[0.5]DT[2020-06-14]HA[2]AB[dp][pd]"
    "FF[4]GM[1]CA[UTF-8]SZ[19];W[pp])\n"
)
NGF_SGF = "(;SZ[19]HA[2]AB[dp][pd]DT[2017-03-16]PW[ace550]PB[p81587]RE[W+]FF[4]GM[1]CA[UTF-8];W[pq])\n"
UGI_SGF = "(;GN[Test Game]PC[Tokyo]SZ[19]HA[2]KM[0.5]PB[kuro]PW[shiro]RE[W+]AB[pd][dp]FF[4]GM[1]CA[UTF-8];W[qq])\n"


@pytest.mark.parametrize("path", [GIB_FIXTURE, NGF_FIXTURE, UGI_FIXTURE])
def test_fixture_root_tags(path):
    tree = load(path)
    root = tree.root
    assert "19" == tree.get_property(root, "SZ")
    assert "2" == tree.get_property(root, "HA")
    assert 2 == len(tree.get_list_property(root, "AB"))
    assert 1 == move_count(tree)
    assert "4" == tree.get_property(root, "FF")
    assert "1" == tree.get_property(root, "GM")
    assert "UTF-8" == tree.get_property(root, "CA")


@pytest.mark.parametrize("path,expected", [(GIB_FIXTURE, GIB_SGF), (NGF_FIXTURE, NGF_SGF), (UGI_FIXTURE, UGI_SGF)])
def test_fixture_output(path, expected):
    assert expected == file_to_converted_string(path)


def test_convert_and_stream_agree(gib_text):
    sink = io.StringIO()
    convert_to_stream(gib_text, GameFormat.GIB, sink)
    assert GIB_SGF == sink.getvalue() == convert(gib_text, GameFormat.GIB)


def test_output_shape(ngf_text):
    sgf = convert(ngf_text, GameFormat.NGF)
    assert sgf.startswith("(;")
    assert sgf.endswith(")\n")


def test_parse_errors_surface():
    with pytest.raises(ParseError):
        convert("", GameFormat.GIB)
    with pytest.raises(ParseError):
        convert("[Data]\nQD,B1,1,0\n", GameFormat.UGI)


def test_board_size_error_after_parse(ngf_text):
    lines = ngf_text.split("\n")
    lines[1] = "21"
    with pytest.raises(BadBoardSizeError):
        parse("\n".join(lines), GameFormat.NGF)


def test_unknown_extension(tmp_path):
    path = tmp_path / "game.sgf"
    path.write_text("(;SZ[19])", encoding="utf-8")
    with pytest.raises(UnknownFormatError):
        load(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing.gib")


def test_legacy_encoding_is_used(tmp_path, ngf_text):
    lines = ngf_text.split("\n")
    lines[2] = "\u56f4\u68cb 6D*"
    path = tmp_path / "game.ngf"
    path.write_bytes("\n".join(lines).encode("gb18030"))
    tree = load(path)
    assert "\u56f4\u68cb" == tree.get_property(tree.root, "PW")


def test_encoding_override(tmp_path, gib_text):
    path = tmp_path / "game.gib"
    path.write_bytes(gib_text.replace("kim", "\u00e9t\u00e9").encode("latin-1"))
    tree = load(path, encoding="latin-1")
    assert "\u00e9t\u00e9" == tree.get_property(tree.root, "PB")


def test_undecodable_bytes_fall_back(caplog):
    data = "\\[GAMEBLACKNAME=caf\u00e9\\]\nSTO 0 2 1 3 3\n".encode("latin-1")
    with caplog.at_level("WARNING"):
        text = decode_contents(data, "utf-8")
    assert "STO 0 2 1 3 3" in text
    assert "falling back" in caplog.text


def test_unknown_encoding_falls_back(caplog):
    with caplog.at_level("WARNING"):
        text = decode_contents(b"STO 0 2 1 3 3\n", "no-such-codec")
    assert "STO 0 2 1 3 3\n" == text
    assert "unknown encoding" in caplog.text


@pytest.mark.parametrize("guess", ["cp424", "cp500", "utf-16", None])
def test_guess_that_garbles_ascii_is_ignored(monkeypatch, caplog, guess):
    monkeypatch.setattr("chardet.detect", lambda data: {"encoding": guess, "confidence": 0.5})
    data = "\\[GAMEBLACKNAME=caf\u00e9\\]\nSTO 0 2 1 3 3\n".encode("latin-1")
    with caplog.at_level("WARNING"):
        text = decode_contents(data, "utf-8")
    assert text.startswith("\\[GAMEBLACKNAME=caf")
    assert "STO 0 2 1 3 3\n" in text
    assert "falling back to" in caplog.text

def test_latin1_gib_still_converts():
    data = "\\[GAMEBLACKNAME=caf\u00e9\\]\nSTO 0 2 1 3 3\n".encode("latin-1")
    tree = parse(decode_contents(data, "utf-8"), GameFormat.GIB)
    assert "dd" == tree.get_property(tree.children(tree.root)[0], "B")


def test_save_file_round_trip(tmp_path, ugi_text):
    target = tmp_path / "out.sgf"
    save_file(target, parse(ugi_text, GameFormat.UGI))
    assert UGI_SGF.encode("utf-8") == target.read_bytes()


def test_output_path(tmp_path):
    assert tmp_path / "game.sgf" == output_path(tmp_path / "game.gib")
    assert tmp_path / "out" / "game.txt" == output_path(tmp_path / "game.ngf", ".txt", tmp_path / "out")
