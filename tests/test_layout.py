"""
Tests for the layout cursor and the page-number pass
"""
import io
import unittest

from formprint import inspect_document
from formprint.errors import PageGeometryError
from formprint.layout import A4, LayoutCursor, PageGeometry
from formprint.pagination import PageNumberSlot, PagedCanvas, finalize, page_label


class StubCanvas:
    def __init__(self):
        self.pages_shown = 0

    def showPage(self):
        self.pages_shown += 1


class StubChrome:
    def __init__(self, header_mm=10.0):
        self.header_mm = header_mm
        self.headers = []
        self.footers = []

    def draw_header(self, cursor):
        self.headers.append(cursor.page_index)
        return self.header_mm

    def draw_footer(self, cursor):
        self.footers.append(cursor.page_index)


class PageGeometryTestCase(unittest.TestCase):

    def test_a4_defaults(self):
        self.assertEqual(A4.width_mm, 210.0)
        self.assertEqual(A4.height_mm, 297.0)
        self.assertEqual(A4.content_width_mm, 180.0)
        self.assertEqual(A4.footer_band_mm, 20.0)

    def test_no_content_width(self):
        with self.assertRaises(PageGeometryError):
            PageGeometry(width_mm=20, margin_mm=15)

    def test_no_content_height(self):
        with self.assertRaises(PageGeometryError):
            PageGeometry(height_mm=30, margin_mm=15, footer_band_mm=20)


class LayoutCursorTestCase(unittest.TestCase):

    def setUp(self):
        self.cv = StubCanvas()
        self.chrome = StubChrome()
        self.cursor = LayoutCursor(self.cv, PageGeometry(100, 100, 10, 20), self.chrome)
        self.cursor.start()

    def test_start_places_cursor_below_header(self):
        self.assertEqual(self.cursor.y, 20.0)
        self.assertEqual(self.cursor.remaining(), 60.0)
        self.assertEqual(self.chrome.headers, [1])

    def test_fits_without_break(self):
        self.assertFalse(self.cursor.ensure_space(60.0))
        self.assertEqual(self.cursor.pages, [1])
        self.assertEqual(self.cv.pages_shown, 0)

    def test_break_when_short(self):
        self.cursor.advance(30.0)
        self.assertTrue(self.cursor.ensure_space(31.0))
        self.assertEqual(self.cursor.page_index, 2)
        self.assertEqual(self.cursor.pages, [1, 2])
        self.assertEqual(self.cursor.y, 20.0)
        self.assertEqual(self.chrome.footers, [1])
        self.assertEqual(self.chrome.headers, [1, 2])
        self.assertEqual(self.cv.pages_shown, 1)

    def test_no_blank_page_for_oversized_unit(self):
        self.assertFalse(self.cursor.ensure_space(500.0))
        self.assertEqual(self.cursor.pages, [1])

    def test_footer_reserve_shrinks_page(self):
        self.cursor.footer_reserve_mm = 40.0
        self.assertEqual(self.cursor.remaining(), 40.0)
        self.cursor.advance(1.0)
        self.assertTrue(self.cursor.ensure_space(40.0))

    def test_pdf_y_is_bottom_up(self):
        self.assertAlmostEqual(self.cursor.pdf_y(100.0), 0.0)
        self.assertAlmostEqual(self.cursor.pdf_y(0.0), 100.0 * 72 / 25.4)

    def test_independent_cursors(self):
        other = LayoutCursor(StubCanvas(), PageGeometry(100, 100, 10, 20), StubChrome())
        other.start()
        self.cursor.advance(50.0)
        self.cursor.ensure_space(30.0)
        self.assertEqual(other.pages, [1])
        self.assertEqual(other.y, 20.0)


class FinalizeTestCase(unittest.TestCase):

    def _canvas(self, pages, slots=True):
        buf = io.BytesIO()
        cv = PagedCanvas(buf, pagesize=A4.pagesize)
        for i in range(pages):
            cv.drawString(72, 700, f"body {i + 1}")
            if slots:
                cv.reserve_page_number(PageNumberSlot(500, 40, "Helvetica", 8))
            cv.showPage()
        return cv, buf

    def test_page_label(self):
        self.assertEqual(page_label(2, 5), "Page 2 of 5")

    def test_every_page_gets_final_total(self):
        cv, buf = self._canvas(3)
        self.assertEqual(finalize(cv), 3)
        summary = inspect_document(buf.getvalue())
        self.assertEqual(summary.page_count, 3)
        for n, texts in enumerate(summary.page_texts, 1):
            self.assertIn(f"body {n}", texts)
            self.assertIn(f"Page {n} of 3", texts)

    def test_pages_held_until_finalize(self):
        cv, buf = self._canvas(2)
        self.assertEqual(len(cv.page_records), 2)
        self.assertEqual(buf.getvalue(), b"")
        cv.save()
        self.assertTrue(buf.getvalue().startswith(b"%PDF"))

    def test_page_without_slot_has_no_number(self):
        cv, buf = self._canvas(1, slots=False)
        finalize(cv)
        summary = inspect_document(buf.getvalue())
        self.assertFalse(any(t.startswith("Page ") for t in summary.page_texts[0]))
