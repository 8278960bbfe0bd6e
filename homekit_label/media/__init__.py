"""Label rendering (QR code, barcodes, compositing)"""

from .barcodes import render_code39, render_qr
from .label import LabelData, LabelRenderer, build_label_data, generate_label

__all__ = [
    "LabelData",
    "LabelRenderer",
    "build_label_data",
    "generate_label",
    "render_code39",
    "render_qr",
]
