"""
Shared builders for the renderer tests.
"""
import io
import struct
import zlib
from datetime import date

from PIL import Image as PILImage

from formprint import inspect_document, render_document

FIXED_DAY = date(2024, 2, 1)


def png_bytes(width=120, height=40, color="navy"):
    out = io.BytesIO()
    PILImage.new("RGB", (width, height), color).save(out, "PNG")
    return out.getvalue()


def _png_chunk(kind, payload):
    body = kind + payload
    return (struct.pack(">I", len(payload)) + body
            + struct.pack(">I", zlib.crc32(body) & 0xFFFFFFFF))


def png_header(width, height):
    """A PNG whose header claims ``width`` x ``height`` grayscale pixels."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 0, 0, 0, 0)
    return (b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr)
            + _png_chunk(b"IDAT", zlib.compress(b"\x00"))
            + _png_chunk(b"IEND", b""))


def render_and_read(form, answers=None, signatures=None, company=None, **kwargs):
    kwargs.setdefault("generated_on", FIXED_DAY)
    data = render_document(form, answers or {}, signatures, company, **kwargs)
    return data, inspect_document(data)


def page_containing(summary, needle):
    """Index of the first page with a text run containing ``needle``."""
    for i, texts in enumerate(summary.page_texts):
        if any(needle in t for t in texts):
            return i
    return None
