"""Unit tests for avatar file storage."""

import io
import re

import pytest
from starlette.datastructures import UploadFile

from botaniq.core.exceptions import PayloadTooLargeError
from botaniq.services.avatar_storage import AvatarStorage, avatar_filename


class TestAvatarFilename:
    def test_keeps_extension(self):
        assert re.fullmatch(r"profile-[A-Za-z0-9_\-]+\.png", avatar_filename("me.png"))

    def test_names_are_unique(self):
        assert avatar_filename("me.png") != avatar_filename("me.png")

    def test_unsafe_extension_dropped(self):
        name = avatar_filename("me.p$g")
        assert "." not in name

    def test_directory_components_ignored(self):
        name = avatar_filename("../../etc/passwd.jpg")
        assert "/" not in name
        assert name.endswith(".jpg")

    def test_missing_filename(self):
        assert avatar_filename(None).startswith("profile-")


class TestAvatarStorage:
    @pytest.mark.asyncio
    async def test_save_writes_file(self, tmp_path):
        storage = AvatarStorage(tmp_path / "uploads", max_bytes=1024)
        upload = UploadFile(file=io.BytesIO(b"image-bytes"), filename="leaf.jpg")

        filename = await storage.save(upload)

        assert filename.endswith(".jpg")
        assert (tmp_path / "uploads" / filename).read_bytes() == b"image-bytes"

    @pytest.mark.asyncio
    async def test_oversized_upload_leaves_nothing(self, tmp_path):
        storage = AvatarStorage(tmp_path, max_bytes=10)
        upload = UploadFile(file=io.BytesIO(b"x" * 11), filename="big.png")

        with pytest.raises(PayloadTooLargeError):
            await storage.save(upload)

        assert list(tmp_path.iterdir()) == []

    def test_delete_existing(self, tmp_path):
        (tmp_path / "old.png").write_bytes(b"old")
        storage = AvatarStorage(tmp_path, max_bytes=10)

        assert storage.delete("old.png") is True
        assert not (tmp_path / "old.png").exists()

    def test_delete_missing_is_quiet(self, tmp_path):
        storage = AvatarStorage(tmp_path, max_bytes=10)

        assert storage.delete("nope.png") is False

    def test_path_for_stays_inside_directory(self, tmp_path):
        storage = AvatarStorage(tmp_path, max_bytes=10)

        assert storage.path_for("../escape.png") == tmp_path / "escape.png"
