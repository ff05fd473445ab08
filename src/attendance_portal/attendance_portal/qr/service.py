from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass
from typing import Optional

import qrcode
from qrcode.image.pil import PilImage
from PIL import Image

from ..core.constants import DEFAULT_QR_SIZE, QR_BACK_COLOR, QR_BORDER_MODULES, QR_FILL_COLOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QrArtifact:
    payload: str
    size: int
    png: bytes

    @property
    def data_url(self) -> str:
        return "data:image/png;base64," + base64.b64encode(self.png).decode("ascii")


class QrCodeGenerator:
    """Render a payload as a square black-on-white PNG QR code."""

    def __init__(self, *, border: int = QR_BORDER_MODULES, fill_color: str = QR_FILL_COLOR, back_color: str = QR_BACK_COLOR):
        self._border = int(border)
        self._fill_color = fill_color
        self._back_color = back_color

    def generate(self, payload: Optional[str], size: int = DEFAULT_QR_SIZE) -> Optional[QrArtifact]:
        """Return the artifact, or None when there is nothing to encode or generation failed.

        Failures are logged only; callers keep showing their placeholder.
        """
        if not payload:
            return None
        try:
            png = self._render(payload, int(size))
        except Exception:
            logger.exception("QR generation failed for payload of length %s", len(payload))
            return None
        return QrArtifact(payload=payload, size=int(size), png=png)

    def _render(self, payload: str, size: int) -> bytes:
        if size <= 0:
            raise ValueError(f"QR size must be positive, got {size}")

        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=1,
            border=self._border,
        )
        qr.add_data(payload)
        qr.make(fit=True)

        # Pick the largest whole box size that fits, then scale to the exact pixel size.
        modules = qr.modules_count + 2 * self._border
        qr.box_size = max(1, size // modules)

        img = qr.make_image(image_factory=PilImage, fill_color=self._fill_color, back_color=self._back_color)
        pil = img.get_image().convert("RGB")
        if pil.size != (size, size):
            pil = pil.resize((size, size), Image.Resampling.NEAREST)

        buf = io.BytesIO()
        pil.save(buf, format="PNG")
        return buf.getvalue()
