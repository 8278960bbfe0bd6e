"""
QR and Code 39 rendering

Both helpers return plain Pillow images so the label renderer can paste
them onto its canvas.
"""

from __future__ import annotations

import logging

import qrcode
from barcode import Code39
from barcode.errors import BarcodeError
from barcode.writer import ImageWriter
from PIL import Image
from qrcode.exceptions import DataOverflowError

from ..errors import RenderError

logger = logging.getLogger(__name__)

QR_ERROR_CORRECTION = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}

# Rendered large, then scaled down with nearest neighbour to keep edges sharp
_CODE39_WRITER_OPTIONS = {
    "module_width": 0.25,
    "module_height": 10.0,
    "quiet_zone": 0.0,
    "write_text": False,
    "dpi": 300,
}


def render_qr(data: str, size: int, error_correction: str = "M") -> Image.Image:
    """
    Render ``data`` as a square QR code of ``size`` x ``size`` pixels

    Raises:
        RenderError: If the data does not fit in a QR code
    """
    qr = qrcode.QRCode(
        version=None,  # Auto-size
        error_correction=QR_ERROR_CORRECTION[error_correction],
        box_size=10,
        border=0,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except DataOverflowError as e:
        raise RenderError(f"QR code data too long: {e}") from e

    img = qr.make_image(fill_color="black", back_color="white").get_image().convert("RGB")
    logger.debug(f"QR version {qr.version} ({img.width}px) scaled to {size}px")
    return img.resize((size, size), Image.Resampling.NEAREST)


def render_code39(data: str, height: int, max_width: int | None = None) -> Image.Image:
    """
    Render ``data`` as a Code 39 barcode without check digit or caption

    The bars are scaled to ``height`` pixels, keeping the aspect ratio unless
    the result would be wider than ``max_width``.

    Raises:
        RenderError: If ``data`` contains characters Code 39 cannot encode
    """
    try:
        code = Code39(data, writer=ImageWriter(), add_checksum=False)
        img = code.render(writer_options=_CODE39_WRITER_OPTIONS).convert("RGB")
    except BarcodeError as e:
        raise RenderError(f"Cannot encode '{data}' as Code 39: {e}") from e

    width = max(1, round(img.width * height / img.height))
    if max_width is not None and width > max_width:
        width = max_width
    return img.resize((width, height), Image.Resampling.NEAREST)
