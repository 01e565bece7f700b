"""
Layout cursor
-------------
Tracks the vertical position on the current page and decides when a page
has to be closed.  Positions are millimetres measured down from the top
edge; ``pdf_y`` converts them to reportlab's bottom-up points.
"""
import logging

from reportlab.lib.units import mm

from .errors import PageGeometryError

log = logging.getLogger(__name__)

A4_W_MM = 210.0
A4_H_MM = 297.0
MARGIN_MM = 15.0
FOOTER_BAND_MM = 20.0


class PageGeometry:
    def __init__(self, width_mm=A4_W_MM, height_mm=A4_H_MM,
                 margin_mm=MARGIN_MM, footer_band_mm=FOOTER_BAND_MM):
        self.width_mm = float(width_mm)
        self.height_mm = float(height_mm)
        self.margin_mm = float(margin_mm)
        self.footer_band_mm = float(footer_band_mm)
        if self.content_width_mm <= 0:
            raise PageGeometryError(
                f"no content width: page {self.width_mm}mm, margin {self.margin_mm}mm")
        if self.height_mm - self.margin_mm - self.footer_band_mm <= 0:
            raise PageGeometryError(
                f"no content height: page {self.height_mm}mm, margin "
                f"{self.margin_mm}mm, footer {self.footer_band_mm}mm")

    @property
    def content_width_mm(self):
        return self.width_mm - 2 * self.margin_mm

    @property
    def pagesize(self):
        return (self.width_mm * mm, self.height_mm * mm)

    @property
    def left(self):
        return self.margin_mm

    @property
    def right(self):
        return self.width_mm - self.margin_mm


A4 = PageGeometry()


class LayoutCursor:
    """Vertical position and page count for one render.

    ``chrome`` draws the page furniture; it needs ``draw_header(cursor)``
    returning the header height in mm and ``draw_footer(cursor)``.
    """

    def __init__(self, cv, geometry=A4, chrome=None):
        self.cv = cv
        self.geometry = geometry
        self.chrome = chrome
        self.page_index = 1
        self.pages = [1]
        self.footer_reserve_mm = geometry.footer_band_mm
        self.y = geometry.margin_mm
        self.page_top = self.y

    # ── geometry ──────────────────────────────────────────────────────────────
    @property
    def top(self):
        return self.geometry.margin_mm

    @property
    def bottom(self):
        return self.geometry.height_mm - self.footer_reserve_mm

    def pdf_y(self, y_mm):
        return (self.geometry.height_mm - y_mm) * mm

    def remaining(self):
        return self.geometry.height_mm - self.y - self.footer_reserve_mm

    # ── movement ──────────────────────────────────────────────────────────────
    def advance(self, dy_mm):
        self.y += dy_mm

    def start(self):
        """Draw the first page's header and place the cursor below it."""
        h = self.chrome.draw_header(self) if self.chrome else 0.0
        self.y = self.top + h
        self.page_top = self.y

    def close_page(self):
        if self.chrome:
            self.chrome.draw_footer(self)
        self.cv.showPage()

    def new_page(self):
        self.close_page()
        self.page_index += 1
        self.pages.append(self.page_index)
        h = self.chrome.draw_header(self) if self.chrome else 0.0
        self.y = self.top + h
        self.page_top = self.y
        log.debug("page break, now on page %d", self.page_index)

    def ensure_space(self, needed_mm):
        """Break the page unless ``needed_mm`` fits below the cursor.

        Returns True when a new page was started.
        """
        if self.remaining() < needed_mm and self.y > self.page_top:
            self.new_page()
            return True
        return False
