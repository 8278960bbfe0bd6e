"""Label settings schema"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Width of the reference layout; every coordinate in the renderer is scaled from it
BASE_LABEL_WIDTH = 842


class LabelSettings(BaseModel):
    """Printed text, fonts and QR options for the label"""

    model_config = ConfigDict(extra="forbid")

    brand: str = "Designed by StudioPeters"
    trademark: str = "®"
    origin: str = "Assembled in the Netherlands"
    connectivity: str = "WIFI"
    text_font: str | None = None  # TrueType/OpenType path, Pillow default font if unset
    width: int = Field(default=BASE_LABEL_WIDTH, ge=200, le=8000)
    qr_error_correction: Literal["L", "M", "Q", "H"] = "M"
    max_code_attempts: int = Field(default=10_000, ge=1)

    @property
    def scale(self) -> float:
        return self.width / BASE_LABEL_WIDTH
