"""Unit tests for the Pillow image adapter."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from cropframe.exceptions import ImageSourceError
from cropframe.geometry import Size
from cropframe.image import read_native_size


class TestReadNativeSize:
    def test_reads_dimensions(self, tmp_path: Path) -> None:
        path = tmp_path / "photo.png"
        Image.new("RGB", (120, 80), color="white").save(path)

        assert read_native_size(path) == Size(width=120, height=80)

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "photo.jpg"
        Image.new("RGB", (64, 48)).save(path)

        assert read_native_size(str(path)) == Size(width=64, height=48)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ImageSourceError, match="Image file not found") as exc_info:
            read_native_size(tmp_path / "missing.png")
        assert exc_info.value.path == tmp_path / "missing.png"

    def test_not_an_image(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.png"
        path.write_text("definitely not pixels")

        with pytest.raises(ImageSourceError, match="Cannot read image"):
            read_native_size(path)
