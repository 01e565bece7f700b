"""
Page chrome
-----------
Branding header on every page, the title block on page 1, and the footer
drawn when a page is closed.  The footer only reserves the spot for
"Page n of total"; the number is stamped by ``pagination.finalize``.
"""
import logging
from datetime import date

from reportlab.lib.units import mm

from .drawing import FONT, draw_text, fit_text, wrap_text
from .formatting import DATE_FORMAT
from .images import fit_box, load_image
from .pagination import PageNumberSlot
from .style import (
    BODY_SIZE, DIVIDER, LEGAL_SIZE, SMALL_SIZE, TEXT, TEXT_MUTED,
)

log = logging.getLogger(__name__)

LOGO_MAX_W_MM = 40.0
LOGO_MAX_H_MM = 15.0
CONTACT_LINE_MM = 3.8
TITLE_SIZE = 16
DESC_LINE_MM = 5.0
LEGAL_LINE_MM = 3.2
FOOTER_RULE_MM = 5.0      # rule sits this far into the footer band
FOOTER_TEXT_MM = 11.0     # footer baseline, measured the same way
BODY_MIN_MM = 20.0        # page-1 body space kept free of the description
TITLE_TAIL_MM = 13.0      # description gap, closing rule and spacing


def rule(c, cursor, y_mm, color=DIVIDER, width=0.5):
    g = cursor.geometry
    c.saveState()
    c.setStrokeColor(color)
    c.setLineWidth(width)
    c.line(g.left * mm, cursor.pdf_y(y_mm), g.right * mm, cursor.pdf_y(y_mm))
    c.restoreState()


class PageChrome:
    def __init__(self, form, settings=None, generated_on=None):
        self.form = form
        self.settings = settings
        self.generated_on = generated_on or date.today()
        self._logo = None
        self._logo_tried = False
        self.description_rest = []

    # ── footer band ───────────────────────────────────────────────────────────
    def legal_lines(self, geometry):
        text = self.settings.legal_footer_text if self.settings else None
        if not text:
            return []
        return wrap_text(text, "normal", LEGAL_SIZE, geometry.content_width_mm * mm)

    def footer_reserve(self, geometry):
        """Footer band plus the legal text stacked above it, in mm."""
        lines = self.legal_lines(geometry)
        extra = len(lines) * LEGAL_LINE_MM + 2.0 if lines else 0.0
        return geometry.footer_band_mm + extra

    def footer_left_text(self):
        return f"{self.form.title} - Rev {self.form.revision}"

    def draw_footer(self, cursor):
        c = cursor.cv
        g = cursor.geometry
        band_top = g.height_mm - g.footer_band_mm

        lines = self.legal_lines(g)
        if lines:
            y = band_top - len(lines) * LEGAL_LINE_MM + 1.0
            c.setFillColor(TEXT_MUTED)
            for line in lines:
                draw_text(c, line, g.left * mm, cursor.pdf_y(y), LEGAL_SIZE)
                y += LEGAL_LINE_MM

        rule_y = band_top + FOOTER_RULE_MM
        rule(c, cursor, rule_y)
        text_y = cursor.pdf_y(band_top + FOOTER_TEXT_MM)
        c.setFillColor(TEXT_MUTED)
        left = fit_text(self.footer_left_text(), "normal", SMALL_SIZE,
                        g.content_width_mm * mm * 0.6)
        draw_text(c, left, g.left * mm, text_y, SMALL_SIZE)
        c.reserve_page_number(
            PageNumberSlot(g.right * mm, text_y, FONT, SMALL_SIZE, TEXT_MUTED))
        c.setFillColor(TEXT)

    # ── header ────────────────────────────────────────────────────────────────
    def logo(self):
        if not self._logo_tried:
            self._logo_tried = True
            data = self.settings.logo_image if self.settings else None
            if data:
                try:
                    self._logo = load_image(data)
                except (OSError, ValueError) as exc:
                    log.warning("company logo could not be decoded: %s", exc)
        return self._logo

    def draw_branding(self, cursor):
        """Logo, company name and contact lines; returns height in mm."""
        s = self.settings
        if s is None:
            return 0.0
        c = cursor.cv
        g = cursor.geometry
        top = cursor.top
        logo_h = 0.0
        logo = self.logo()
        if logo is not None:
            reader, size = logo
            w, logo_h = fit_box(size, LOGO_MAX_W_MM, LOGO_MAX_H_MM)
            try:
                c.drawImage(reader, g.left * mm, cursor.pdf_y(top + logo_h),
                            width=w * mm, height=logo_h * mm, mask="auto")
            except (OSError, ValueError) as exc:
                log.warning("company logo could not be embedded: %s", exc)
                logo_h = 0.0

        text_h = 0.0
        c.setFillColor(TEXT)
        if s.name:
            draw_text(c, s.name, g.right * mm, cursor.pdf_y(top + 5.0), 12,
                      "bold", "right")
            text_h = 6.0
        c.setFillColor(TEXT_MUTED)
        for line in s.contact_lines():
            text_h += CONTACT_LINE_MM
            draw_text(c, line, g.right * mm, cursor.pdf_y(top + text_h),
                      SMALL_SIZE, "normal", "right")
        c.setFillColor(TEXT)

        h = max(logo_h, text_h)
        if h == 0:
            return 0.0
        rule(c, cursor, top + h + 2.0)
        return h + 5.0

    def draw_title_block(self, cursor, top):
        c = cursor.cv
        g = cursor.geometry
        width = g.content_width_mm * mm
        y = top + 7.0
        c.setFillColor(TEXT)
        for line in wrap_text(self.form.title, "bold", TITLE_SIZE, width):
            draw_text(c, line, g.left * mm, cursor.pdf_y(y), TITLE_SIZE, "bold")
            y += 7.0
        y -= 1.0
        c.setFillColor(TEXT_MUTED)
        draw_text(c, f"Revision: {self.form.revision}", g.left * mm,
                  cursor.pdf_y(y), BODY_SIZE)
        y += 5.0
        draw_text(c, f"Generated: {self.generated_on.strftime(DATE_FORMAT)}",
                  g.left * mm, cursor.pdf_y(y), BODY_SIZE)
        y += 2.0
        if self.form.description:
            lines = wrap_text(self.form.description, "normal", BODY_SIZE, width)
            # what doesn't fit above the body minimum continues in the body
            room = cursor.bottom - BODY_MIN_MM - (y + TITLE_TAIL_MM)
            shown = min(len(lines), max(0, int(room // DESC_LINE_MM)))
            self.description_rest = lines[shown:]
            if self.description_rest:
                log.debug("form description: %d line(s) carried into the body",
                          len(self.description_rest))
            if shown:
                y += 5.0
                c.setFillColor(TEXT)
                for line in lines[:shown]:
                    draw_text(c, line, g.left * mm, cursor.pdf_y(y), BODY_SIZE)
                    y += DESC_LINE_MM
                y -= DESC_LINE_MM - 2.0
        rule(c, cursor, y + 2.0, TEXT, 0.8)
        c.setFillColor(TEXT)
        return y + 6.0 - top

    def draw_description_rest(self, cursor):
        """Continue a long form description below the title block."""
        lines, self.description_rest = self.description_rest, []
        if not lines:
            return
        c = cursor.cv
        x = cursor.geometry.left * mm
        c.setFillColor(TEXT)
        for line in lines:
            if cursor.remaining() < DESC_LINE_MM:
                cursor.new_page()
                c.setFillColor(TEXT)
            draw_text(c, line, x, cursor.pdf_y(cursor.y + 4.0), BODY_SIZE)
            cursor.advance(DESC_LINE_MM)
        cursor.advance(3.0)

    def draw_header(self, cursor):
        h = self.draw_branding(cursor)
        if cursor.page_index == 1:
            h += self.draw_title_block(cursor, cursor.top + h)
        return h
