from __future__ import annotations

from typing import IO, Optional

from PIL import Image
from pyzbar.pyzbar import decode as pyzbar_decode


def decode_image(stream: IO[bytes]) -> Optional[str]:
    """Return the first QR payload found in an image, or None."""
    img = Image.open(stream).convert("RGB")
    decoded = pyzbar_decode(img)
    if not decoded:
        return None
    return decoded[0].data.decode("utf-8").strip()
