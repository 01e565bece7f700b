"""
Embedded images
---------------
Signature and logo images arrive as raw bytes, a base64 string, or a
``data:`` URL.  They are decoded with Pillow and handed to reportlab as an
in-memory ImageReader.
"""
import base64
import binascii
import io

from PIL import Image as PILImage
from reportlab.lib.utils import ImageReader

DEFAULT_ASPECT = 3.0   # width / height when the image has no usable size


def decode_image_data(data):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    s = str(data).strip()
    if s.startswith("data:"):
        s = s.partition(",")[2]
    s = s.replace("\n", "").replace("\r", "").replace(" ", "")
    try:
        return base64.b64decode(s, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"image data is not valid base64: {exc}") from exc


def load_image(data):
    """Return ``(ImageReader, (width_px, height_px))``.

    Raises OSError or ValueError when the data isn't a readable image.
    """
    raw = decode_image_data(data)
    if not raw:
        raise ValueError("empty image data")
    try:
        img = PILImage.open(io.BytesIO(raw))
        img.load()
    except PILImage.DecompressionBombError as exc:
        raise ValueError(f"image too large to embed: {exc}") from exc
    if img.mode not in ("RGB", "RGBA", "L"):
        img = img.convert("RGBA" if "transparency" in img.info else "RGB")
    return ImageReader(img), img.size


def fit_box(size, max_w, max_h, default_aspect=DEFAULT_ASPECT):
    """Largest ``(w, h)`` inside ``max_w`` x ``max_h`` keeping the aspect ratio."""
    try:
        px_w, px_h = size
        aspect = float(px_w) / float(px_h)
    except (TypeError, ValueError, ZeroDivisionError):
        aspect = default_aspect
    if aspect <= 0:
        aspect = default_aspect
    w = max_w
    h = w / aspect
    if h > max_h:
        h = max_h
        w = h * aspect
    return w, h
