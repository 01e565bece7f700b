"""
Document assembly
-----------------
``render_document`` turns a form definition and its submitted answers into
a finished PDF: page chrome, the block tree, then the page-number pass.
Every call works on its own buffer, canvas and cursor.
"""
import logging
from datetime import date
from io import BytesIO

from .blocks import BlockRenderer
from .chrome import PageChrome
from .layout import A4, LayoutCursor
from .model import as_company, as_form, as_signatures
from .pagination import PagedCanvas, finalize

log = logging.getLogger(__name__)

CREATOR = "formprint"
SUBJECT = "Form Submission"


def document_title(form):
    return f"{form.title} - Rev {form.revision}"


def render_document(form, answers, signatures=None, company_settings=None, *,
                    generated_on=None, geometry=None):
    """Render ``form`` filled with ``answers`` and return the PDF bytes.

    ``form``, ``signatures`` and ``company_settings`` may be model objects or
    the plain dicts the form editor stores.  ``answers`` maps block titles to
    raw values.  ``generated_on`` fixes the printed dates; with it set, equal
    inputs give byte-identical output.
    """
    form = as_form(form)
    signatures = as_signatures(signatures)
    settings = as_company(company_settings)
    geometry = geometry or A4
    fixed_date = generated_on is not None
    generated_on = generated_on or date.today()

    buf = BytesIO()
    cv = PagedCanvas(buf, pagesize=geometry.pagesize,
                     invariant=1 if fixed_date else 0)
    cv.setTitle(document_title(form))
    cv.setSubject(SUBJECT)
    cv.setCreator(CREATOR)
    if settings is not None and settings.name:
        cv.setAuthor(settings.name)

    chrome = PageChrome(form, settings, generated_on)
    cursor = LayoutCursor(cv, geometry, chrome)
    cursor.footer_reserve_mm = chrome.footer_reserve(geometry)
    cursor.start()
    chrome.draw_description_rest(cursor)

    if not form.blocks:
        log.warning("form %r has no blocks; rendering an empty body", form.title)
    BlockRenderer(cursor, answers, signatures, generated_on).render_blocks(form.blocks)

    cursor.close_page()
    total = finalize(cv)
    log.info("rendered %r: %d page(s)", form.title, total)
    return buf.getvalue()
