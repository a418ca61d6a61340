"""
Tests for the command line interface.
"""

import json

import pytest

from barcode_engine import EAN13
from barcode_engine.__main__ import main


class TestTextOutput:

    def test_ascii_default(self, capsys):
        assert main(["ean13", "750103131130", "--height", "2"]) == 0
        out = capsys.readouterr().out
        rows = out.rstrip("\n").split("\n")
        assert len(rows) == 2
        assert rows[0] == "".join("#" if b else " " for b in EAN13("750103131130").encode())

    def test_json(self, capsys):
        assert main(["EAN8", "5512345", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["height"] == 10
        assert len(data["encoding"]) == 67

    def test_svg(self, capsys):
        assert main(["codabar", "A1234B", "--format", "svg", "--xdim", "2"]) == 0
        assert capsys.readouterr().out.startswith('<svg version="1.1"')

    def test_code39_checksum(self, capsys):
        assert main(["code39", "1234", "--checksum", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["encoding"]) == 90

    def test_code128_charset(self, capsys):
        assert main(["code128", "HELLO", "--charset", "a", "--format", "json", "--height", "1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert "".join(str(b) for b in data["encoding"]).startswith("11010000100")


class TestFileOutput:

    def test_png(self, tmp_path, capsys):
        path = tmp_path / "code.png"
        assert main(["itf", "1234567", "--format", "png", "--output", str(path)]) == 0
        assert path.read_bytes().startswith(b"\x89PNG")
        assert "Wrote png barcode" in capsys.readouterr().out

    def test_pdf(self, tmp_path):
        path = tmp_path / "code.pdf"
        assert main(["upca", "03600029145", "--format", "pdf", "--output", str(path)]) == 0
        assert path.read_bytes().startswith(b"%PDF")

    def test_text_to_file(self, tmp_path):
        path = tmp_path / "code.svg"
        assert main(["code93", "TEST93", "--format", "svg", "--output", str(path)]) == 0
        assert path.read_text(encoding="utf-8").endswith("</svg>")

    def test_binary_requires_output(self):
        with pytest.raises(SystemExit):
            main(["ean13", "750103131130", "--format", "png"])


class TestErrors:

    def test_checksum_error(self, capsys):
        assert main(["ean13", "7501031311305"]) == 1
        error = json.loads(capsys.readouterr().out)
        assert error["code"] == "CHECKSUM"
        assert error["input"] == "7501031311305"

    def test_length_error(self, capsys):
        assert main(["ean2", "123"]) == 1
        assert json.loads(capsys.readouterr().out)["code"] == "LENGTH"

    def test_character_error(self, capsys):
        assert main(["code39", "hello"]) == 1
        assert json.loads(capsys.readouterr().out)["code"] == "CHARACTER"

    def test_code128_without_charset(self, capsys):
        assert main(["code128", "HELLO"]) == 1
        assert json.loads(capsys.readouterr().out)["code"] == "CHARACTER"

    def test_conversion_error(self, capsys):
        assert main(["code128", "HELLO", "--charset", "A", "--format", "json", "--height", "0"]) == 1
        assert json.loads(capsys.readouterr().out)["code"] == "CONVERSION"

    def test_unknown_symbology(self):
        with pytest.raises(SystemExit):
            main(["qr", "1234"])

    def test_option_not_supported(self, capsys):
        assert main(["ean13", "750103131130", "--checksum"]) == 1
        assert "Unsupported options" in json.loads(capsys.readouterr().out)["error"]
