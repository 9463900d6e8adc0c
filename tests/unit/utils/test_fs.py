"""
Tests for the seed data file helpers.
"""
import pytest

from umami_content.core.exceptions import DataFileError, RowMappingError
from umami_content.utils.fs import combine_row, load_csv, read_text_asset


class TestLoadCsv:
    """Tests for load_csv."""

    def test_header_and_numbered_rows(self, tmp_dir):
        path = tmp_dir / "pages.csv"
        path.write_text(
            "title, body ,slug\n"
            "About Bread & Butter,about.html,about-us\n"
            "\n"
            "Contact us,contact.html,contact\n",
            encoding="utf-8",
        )

        header, rows = load_csv(path)

        assert header == ["title", "body", "slug"]
        assert rows == [
            (2, ["About Bread & Butter", "about.html", "about-us"]),
            (4, ["Contact us", "contact.html", "contact"]),
        ]

    def test_quoted_cells_with_commas(self, tmp_dir):
        path = tmp_dir / "articles.csv"
        path.write_text('title,tags\nCake,"Cake,Dessert"\n', encoding="utf-8")

        _, rows = load_csv(path)
        assert rows[0][1] == ["Cake", "Cake,Dessert"]

    def test_header_only(self, tmp_dir):
        path = tmp_dir / "empty.csv"
        path.write_text("title,body\n", encoding="utf-8")
        assert load_csv(path) == (["title", "body"], [])

    def test_missing_file(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            load_csv(tmp_dir / "missing.csv")

    def test_byte_order_mark_dropped_from_header(self, tmp_dir):
        path = tmp_dir / "pages.csv"
        path.write_bytes(b"\xef\xbb\xbftitle,slug\nContact us,contact\n")

        header, rows = load_csv(path)

        assert header == ["title", "slug"]
        assert rows == [(2, ["Contact us", "contact"])]

    def test_undecodable_file_raises(self, tmp_dir):
        path = tmp_dir / "pages.csv"
        path.write_bytes(b"title,slug\nCaf\xe9,cafe\n")

        with pytest.raises(DataFileError) as exc_info:
            load_csv(path)
        assert exc_info.value.path == path
        assert "not valid UTF-8" in str(exc_info.value)


class TestCombineRow:
    """Tests for combine_row."""

    def test_maps_cells_to_header(self):
        assert combine_row(["title", "slug"], ["Contact us", "contact"], 2, "pages.csv") == {
            "title": "Contact us",
            "slug": "contact",
        }

    def test_length_mismatch_raises(self):
        with pytest.raises(RowMappingError) as exc_info:
            combine_row(["title", "slug"], ["Contact us"], 5, "pages.csv")
        assert exc_info.value.line == 5
        assert str(exc_info.value) == "pages.csv, line 5: expected 2 columns, got 1"


class TestReadTextAsset:
    """Tests for read_text_asset."""

    def test_reads_file(self, tmp_dir):
        path = tmp_dir / "about.html"
        path.write_text("<p>Hello</p>", encoding="utf-8")
        assert read_text_asset(path) == "<p>Hello</p>"

    def test_missing_file_returns_none(self, tmp_dir):
        assert read_text_asset(tmp_dir / "nope.html") is None

    def test_undecodable_file_raises(self, tmp_dir):
        path = tmp_dir / "latin1.html"
        path.write_bytes(b"<p>Caf\xe9</p>")

        with pytest.raises(DataFileError) as exc_info:
            read_text_asset(path)
        assert exc_info.value.path == path
