"""
test_file_manager.py
--------------------
Unit tests for FileManager: copying into managed storage, URI resolution
and deletion of physical copies.
"""
import pytest

from umami_content.core.exceptions import DatabaseError


@pytest.fixture
def source_image(tmp_dir):
    source = tmp_dir / "source" / "banner.png"
    source.parent.mkdir()
    source.write_bytes(b"\x89PNG banner")
    return source


class TestRealpath:
    """Test FileManager.realpath()."""

    def test_public_uri(self, file_manager, files_dir):
        assert file_manager.realpath("public://banner.png") == files_dir / "banner.png"

    def test_other_scheme_raises(self, file_manager):
        with pytest.raises(DatabaseError):
            file_manager.realpath("private://banner.png")


class TestCopyToManaged:
    """Test FileManager.copy_to_managed()."""

    def test_copies_and_creates_record(self, file_manager, files_dir, source_image):
        record, created = file_manager.copy_to_managed(source_image)

        assert created is True
        assert record.uri == "public://banner.png"
        assert record.filename == "banner.png"
        assert record.filemime == "image/png"
        assert record.filesize == len(b"\x89PNG banner")
        assert record.status is True
        assert (files_dir / "banner.png").read_bytes() == b"\x89PNG banner"
        assert file_manager.get_by_uri("public://banner.png") is record

    def test_same_name_replaces_file_and_reuses_record(
        self, file_manager, files_dir, source_image
    ):
        first, _ = file_manager.copy_to_managed(source_image)
        source_image.write_bytes(b"new")

        second, created = file_manager.copy_to_managed(source_image)

        assert created is False
        assert second is first
        assert second.filesize == 3
        assert (files_dir / "banner.png").read_bytes() == b"new"
        assert file_manager.count() == 1

    def test_missing_source_raises(self, file_manager, tmp_dir):
        with pytest.raises(FileNotFoundError):
            file_manager.copy_to_managed(tmp_dir / "missing.png")
        assert file_manager.count() == 0


class TestDelete:
    """Test FileManager.delete()."""

    def test_removes_record_and_copy(self, file_manager, files_dir, source_image):
        record, _ = file_manager.copy_to_managed(source_image)

        assert file_manager.delete([record]) == 1
        assert file_manager.count() == 0
        assert not (files_dir / "banner.png").exists()

    def test_missing_copy_is_not_an_error(self, file_manager, files_dir, source_image):
        record, _ = file_manager.copy_to_managed(source_image)
        (files_dir / "banner.png").unlink()

        assert file_manager.delete([record]) == 1


class TestDiscardNewCopies:
    """Test FileManager.discard_new_copies()."""

    def test_removes_copies_made_in_session(self, file_manager, files_dir, source_image):
        file_manager.copy_to_managed(source_image)

        assert file_manager.discard_new_copies() == 1
        assert not (files_dir / "banner.png").exists()
        assert file_manager.new_copies == []

    def test_keeps_files_that_existed_before(self, file_manager, files_dir, source_image):
        files_dir.mkdir(parents=True, exist_ok=True)
        (files_dir / "banner.png").write_bytes(b"old")

        file_manager.copy_to_managed(source_image)

        assert file_manager.new_copies == []
        assert file_manager.discard_new_copies() == 0
        assert (files_dir / "banner.png").exists()
