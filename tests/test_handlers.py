"""Tests for the Gradio callbacks."""

import tempfile
from pathlib import Path

import pytest

from json2csv_web.handlers import (
    convert_and_preview_handler,
    convert_handler,
    export_csv_handler,
    load_uploaded_json,
    preview_rows_handler,
)

PRODUCTS = '[{"id": 1, "nome": "Produto A"}, {"id": 2}, "x"]'


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    return tmp_path


class TestConvertHandler:
    def test_success(self):
        csv_text, message = convert_handler(PRODUCTS, ";")
        assert csv_text == "id;nome\n1;Produto A\n2;\n;"
        assert message == "Conversion successful."

    def test_failure_clears_output(self):
        csv_text, message = convert_handler("[]", ",")
        assert csv_text == ""
        assert message == "JSON deve ser um array não vazio."


class TestPreview:
    def test_preview_rows(self):
        frame = preview_rows_handler(PRODUCTS, ",")
        assert list(frame.columns) == ["id", "nome"]
        assert frame.values.tolist() == [["1", "Produto A"], ["2", ""], ["", ""]]

    def test_preview_is_limited(self):
        text = "[" + ",".join('{"n": %d}' % i for i in range(20)) + "]"
        frame = preview_rows_handler(text, ",", limit=5)
        assert len(frame) == 5

    def test_preview_keeps_number_text(self):
        frame = preview_rows_handler('[{"a": 1e400, "b": 1.10}]', ",")
        assert frame.values.tolist() == [["1E+400", "1.10"]]

    def test_preview_of_invalid_input(self):
        assert preview_rows_handler("{ invalid json }", ",") is None

    def test_convert_and_preview(self):
        csv_text, message, frame = convert_and_preview_handler("[1]", ",")
        assert csv_text == ""
        assert message == "O primeiro item do array deve ser um objeto."
        assert frame is None


class TestLoadUploadedJson:
    def test_no_file(self):
        assert load_uploaded_json(None) == ("", "No file uploaded.")

    def test_loads_text(self, tmp_path):
        path = tmp_path / "upload.json"
        path.write_text(PRODUCTS, encoding="utf-8")

        text, message = load_uploaded_json(str(path))
        assert text == PRODUCTS
        assert message.startswith("File loaded.")

    def test_unreadable_file(self, tmp_path):
        text, message = load_uploaded_json(str(tmp_path / "missing.json"))
        assert text == ""
        assert message.startswith("Error reading file:")


class TestExportCsvHandler:
    def test_writes_csv_with_default_name(self, temp_dir):
        path, message = export_csv_handler(PRODUCTS, ",", "")
        assert Path(path) == temp_dir / "output.csv"
        assert Path(path).read_text(encoding="utf-8") == "id,nome\n1,Produto A\n2,\n,"
        assert message.startswith("Export successful!")

    def test_appends_extension_once(self, temp_dir):
        path, _ = export_csv_handler(PRODUCTS, ",", "produtos")
        assert Path(path).name == "produtos.csv"

        path, _ = export_csv_handler(PRODUCTS, ",", "produtos.CSV")
        assert Path(path).name == "produtos.CSV"

    def test_strips_directories_from_name(self, temp_dir):
        path, _ = export_csv_handler(PRODUCTS, ",", "../../etc/evil")
        assert Path(path) == temp_dir / "evil.csv"

    def test_unencodable_text_is_not_written(self, temp_dir):
        """Test a lone surrogate escape returns a message instead of raising."""
        path, message = export_csv_handler('[{"a": "\\ud800"}]', ",", "x")
        assert path is None
        assert message.startswith("Erro interno: ")
        assert not (temp_dir / "x.csv").exists()

    def test_conversion_failure(self, temp_dir):
        path, message = export_csv_handler("", ",", "output")
        assert path is None
        assert message == "JSON vazio."
        assert not (temp_dir / "output.csv").exists()
