"""
Tests for QR/barcode rendering and label compositing
"""
from __future__ import annotations

import io
import random

import pytest
from PIL import Image

from homekit_label.config import LabelSettings
from homekit_label.errors import RenderError
from homekit_label.media.barcodes import render_code39, render_qr
from homekit_label.media.label import (
    LABEL_DPI,
    LabelData,
    LabelRenderer,
    build_label_data,
    generate_label,
)


@pytest.fixture
def label():
    return build_label_data(5, "613-80-755", "HSPN", "30AEA40506A0", rng=random.Random(3))


class TestRenderQr:
    """Tests for render_qr."""

    def test_size(self):
        img = render_qr("X-HM://0053158R7HSPN", 136)
        assert img.size == (136, 136)
        assert img.mode == "RGB"

    def test_has_dark_modules(self):
        img = render_qr("X-HM://0053158R7HSPN", 100, "Q")
        colors = {color for _, color in img.getcolors()}
        assert (0, 0, 0) in colors
        assert (255, 255, 255) in colors

    def test_too_much_data(self):
        with pytest.raises(RenderError):
            render_qr("A" * 8000, 100, "H")


class TestRenderCode39:
    """Tests for render_code39."""

    def test_height(self):
        img = render_code39("AB5C2DE/F", height=22)
        assert img.height == 22
        assert img.width > 22

    def test_max_width(self):
        img = render_code39("0" * 33, height=40, max_width=120)
        assert img.width == 120

    def test_illegal_character(self):
        with pytest.raises(RenderError):
            render_code39("ab#", height=20)


class TestBuildLabelData:
    """Tests for build_label_data."""

    def test_fields(self, label):
        assert isinstance(label, LabelData)
        assert label.uri == "X-HM://0053158R7HSPN"
        assert label.category_name == "Light"
        assert label.device_code[2] == "5"
        assert len(label.serial) == 12
        assert len(label.csn) == 33
        assert label.header.startswith("HomeKit Light | ")

    def test_reproducible_with_seeded_source(self):
        first = build_label_data(5, "613-80-755", "HSPN", rng=random.Random(9))
        second = build_label_data(5, "613-80-755", "HSPN", rng=random.Random(9))
        assert first == second
        assert first.mac == ""


class TestLabelRenderer:
    """Tests for LabelRenderer."""

    def test_render_size(self, label):
        img = LabelRenderer().render(label)
        assert img.size == (842, 240)

    def test_scaled_render(self, label):
        img = LabelRenderer(LabelSettings(width=1684)).render(label)
        assert img.size == (1684, 480)

    def test_without_mac(self):
        label = build_label_data(2, "482-91-573", "AB12", rng=random.Random(1))
        img = LabelRenderer().render(label)
        assert img.width == 842

    def test_png_bytes(self, label):
        data = LabelRenderer().to_png_bytes(label)
        assert data[:8] == b"\x89PNG\r\n\x1a\n"
        with Image.open(io.BytesIO(data)) as img:
            assert img.format == "PNG"
            assert round(img.info["dpi"][0]) == LABEL_DPI

    def test_save_creates_directories(self, label, tmp_path):
        output = tmp_path / "nested" / "dir" / "label.png"
        path = LabelRenderer().save(label, output)
        assert path == output
        assert output.exists()
        with Image.open(output) as img:
            assert img.size == (842, 240)

    def test_missing_font(self, label, tmp_path):
        settings = LabelSettings(text_font=str(tmp_path / "missing.ttf"))
        with pytest.raises(RenderError, match="font"):
            LabelRenderer(settings).render(label)


class TestGenerateLabel:
    """Tests for generate_label."""

    def test_writes_file(self, tmp_path):
        output = tmp_path / "out" / "label.png"
        label = generate_label(5, "613-80-755", "HSPN", "30AEA40506A0", output, rng=random.Random(5))
        assert output.exists()
        assert label.uri == "X-HM://0053158R7HSPN"
