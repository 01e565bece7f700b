"""
Page numbering
--------------
The total page count is only known once the last block has been laid out,
so pages are held back instead of being written when they are closed.  Each
held page keeps the spot its footer reserved for the page number; the
finalizer fills in "Page n of total" on every page and then writes the file.
"""
import logging

from reportlab.pdfgen import canvas

log = logging.getLogger(__name__)

PAGE_LABEL = "Page {page} of {total}"


class PageNumberSlot:
    def __init__(self, x, y, font, size, color=None):
        self.x = x            # right edge, points
        self.y = y            # baseline, points
        self.font = font
        self.size = size
        self.color = color


class PageRecord:
    def __init__(self, number, state, slot):
        self.number = number
        self.state = state
        self.slot = slot


class PagedCanvas(canvas.Canvas):
    """Canvas that defers page output until :func:`finalize`."""

    def __init__(self, *args, **kwargs):
        canvas.Canvas.__init__(self, *args, **kwargs)
        self.page_records = []
        self.pending_slot = None
        self.finalized = False

    def reserve_page_number(self, slot):
        self.pending_slot = slot

    def showPage(self):
        self.page_records.append(
            PageRecord(len(self.page_records) + 1, dict(self.__dict__),
                       self.pending_slot))
        self.pending_slot = None
        self._startPage()

    def save(self):
        if not self.finalized:
            finalize(self)


def page_label(page, total):
    return PAGE_LABEL.format(page=page, total=total)


def finalize(c):
    """Stamp page numbers on every held page and write the document.

    Returns the total page count.
    """
    records = list(c.page_records)
    total = len(records)
    for rec in records:
        c.__dict__.update(rec.state)
        slot = rec.slot
        if slot is not None:
            c.saveState()
            c.setFont(slot.font, slot.size)
            if slot.color is not None:
                c.setFillColor(slot.color)
            c.drawRightString(slot.x, slot.y, page_label(rec.number, total))
            c.restoreState()
        canvas.Canvas.showPage(c)
    c.finalized = True
    canvas.Canvas.save(c)
    log.debug("finalized %d page(s)", total)
    return total
