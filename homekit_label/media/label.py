"""
HomeKit label compositing

Builds the printable label: setup code digits and QR code on the left,
device information and Code 39 barcodes on the right.

Layout coordinates are expressed for an 842 px wide label and multiplied by
``LabelSettings.scale``.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..config.schema import LabelSettings
from ..device.categories import category_name
from ..device.identifiers import (
    format_mac,
    generate_csn,
    generate_device_code,
    generate_serial,
)
from ..errors import RenderError
from ..pairing.codes import RandomSource, plain_setup_code
from ..pairing.uri import encode_setup_uri
from .barcodes import render_code39, render_qr

logger = logging.getLogger(__name__)

LABEL_DPI = 300

BASE_HEIGHT = 240
TEXT_X = 200
MAC_X = 560
TOP_Y = 6
SPACING_TOP = 20
SPACING_BODY = 18
SPACING_EXTRA = 6
BARCODE_SPACING = 30
BARCODE_HEIGHT = 22
RIGHT_MARGIN = 12

CODE_X = 76
CODE_STEP = 20
CODE_ROWS_Y = (12, 39)
QR_X = 19
QR_Y = 77
QR_SIZE = 136

TEXT_FONT_SIZE = 18
CODE_FONT_SIZE = 28
SUPERSCRIPT_FONT_SIZE = 8


@dataclass(frozen=True)
class LabelData:
    """Everything printed on one label"""

    category: int
    category_name: str
    password: str
    setup_id: str
    mac: str
    uri: str
    device_code: str
    serial: str
    csn: str

    @property
    def header(self) -> str:
        return f"HomeKit {self.category_name} | {self.device_code}"


def build_label_data(
    category: int,
    password: str,
    setup_id: str,
    mac: str = "",
    rng: RandomSource | None = None,
) -> LabelData:
    """
    Compute the setup URI and draw the random identifiers for a label

    ``password``, ``setup_id`` and ``mac`` are expected to be validated
    already (see homekit_label.validation).
    """
    return LabelData(
        category=category,
        category_name=category_name(category),
        password=password,
        setup_id=setup_id,
        mac=mac,
        uri=encode_setup_uri(category, password, setup_id),
        device_code=generate_device_code(category, rng=rng),
        serial=generate_serial(rng=rng),
        csn=generate_csn(rng=rng),
    )


class LabelRenderer:
    """
    Render LabelData to a Pillow image

    Usage::

        renderer = LabelRenderer(settings)
        renderer.save(label, "out/label.png")
    """

    def __init__(self, settings: LabelSettings | None = None):
        self.settings = settings or LabelSettings()
        self.scale = self.settings.scale
        self._fonts: dict[int, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}

    def _px(self, value: float) -> int:
        return int(value * self.scale)

    def _font(self, size: int):
        px = max(1, self._px(size))
        if px not in self._fonts:
            if self.settings.text_font:
                try:
                    self._fonts[px] = ImageFont.truetype(self.settings.text_font, px)
                except OSError as e:
                    raise RenderError(f"Cannot load font {self.settings.text_font}: {e}") from e
            else:
                self._fonts[px] = ImageFont.load_default(size=px)
        return self._fonts[px]

    def _text(self, draw: ImageDraw.ImageDraw, x: float, y: float, text: str, size: int = TEXT_FONT_SIZE) -> None:
        draw.text((self._px(x), self._px(y)), text, fill="black", font=self._font(size))

    def _barcode(self, canvas: Image.Image, x: float, y: float, data: str) -> None:
        left = self._px(x)
        img = render_code39(
            data,
            height=max(1, self._px(BARCODE_HEIGHT)),
            max_width=canvas.width - left - self._px(RIGHT_MARGIN),
        )
        canvas.paste(img, (left, self._px(y)))

    def _draw_setup_code(self, draw: ImageDraw.ImageDraw, password: str) -> None:
        digits = plain_setup_code(password)
        for row, row_y in enumerate(CODE_ROWS_Y):
            for i, digit in enumerate(digits[row * 4:row * 4 + 4]):
                self._text(draw, CODE_X + i * CODE_STEP, row_y, digit, CODE_FONT_SIZE)

    def _draw_details(self, canvas: Image.Image, draw: ImageDraw.ImageDraw, label: LabelData) -> None:
        s = self.settings
        y = TOP_Y

        self._text(draw, TEXT_X, y, f"{label.header} | {s.connectivity}")
        y += SPACING_TOP

        self._text(draw, TEXT_X, y, s.brand)
        if s.trademark:
            brand_width = draw.textlength(s.brand, font=self._font(TEXT_FONT_SIZE))
            draw.text(
                (self._px(TEXT_X) + int(brand_width), self._px(y + 3)),
                s.trademark,
                fill="black",
                font=self._font(SUPERSCRIPT_FONT_SIZE),
            )
        y += SPACING_TOP

        self._text(draw, TEXT_X, y, s.origin)
        y += SPACING_TOP

        self._text(draw, TEXT_X, y, f"(1P){label.device_code}")
        if label.mac:
            self._text(draw, MAC_X, y, f"MAC: {format_mac(label.mac)}")
            self._barcode(canvas, MAC_X, y + SPACING_BODY + SPACING_EXTRA, label.mac.upper())
        y += SPACING_BODY + SPACING_EXTRA

        self._barcode(canvas, TEXT_X, y, label.device_code)
        y += BARCODE_SPACING

        self._text(draw, TEXT_X, y, f"(S) Serial No. {label.serial}")
        y += SPACING_BODY + SPACING_EXTRA
        self._barcode(canvas, TEXT_X, y, label.serial)
        y += BARCODE_SPACING

        self._text(draw, TEXT_X, y, f"CSN {label.csn}")
        y += SPACING_BODY + SPACING_EXTRA
        self._barcode(canvas, TEXT_X, y, label.csn)

    def render(self, label: LabelData) -> Image.Image:
        """Compose the label image"""
        canvas = Image.new("RGB", (self.settings.width, self._px(BASE_HEIGHT)), "white")
        draw = ImageDraw.Draw(canvas)

        draw.rectangle(
            (self._px(QR_X - 9), self._px(4), self._px(QR_X + QR_SIZE + 9), self._px(QR_Y + QR_SIZE + 9)),
            outline="black",
            width=max(1, self._px(2)),
        )
        self._draw_setup_code(draw, label.password)

        qr = render_qr(label.uri, self._px(QR_SIZE), self.settings.qr_error_correction)
        canvas.paste(qr, (self._px(QR_X), self._px(QR_Y)))

        self._draw_details(canvas, draw, label)
        logger.debug(f"Rendered label {canvas.width}x{canvas.height} for {label.uri}")
        return canvas

    def to_png_bytes(self, label: LabelData) -> bytes:
        buffer = io.BytesIO()
        self.render(label).save(buffer, format="PNG", dpi=(LABEL_DPI, LABEL_DPI))
        return buffer.getvalue()

    def save(self, label: LabelData, output: str | Path) -> Path:
        """
        Render and write the label as PNG, creating parent directories

        Raises:
            RenderError: If the file cannot be written
        """
        path = Path(output)
        image = self.render(label)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            image.save(path, format="PNG", dpi=(LABEL_DPI, LABEL_DPI))
        except OSError as e:
            raise RenderError(f"Cannot write label to {path}: {e}") from e

        logger.info(f"Label saved to {path}")
        return path


def generate_label(
    category: int,
    password: str,
    setup_id: str,
    mac: str,
    output: str | Path,
    settings: LabelSettings | None = None,
    rng: RandomSource | None = None,
) -> LabelData:
    """Build, render and save a label in one call; returns the printed data"""
    label = build_label_data(category, password, setup_id, mac, rng=rng)
    LabelRenderer(settings).save(label, output)
    return label
