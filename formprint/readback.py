"""
PDF read-back
-------------
Opens a rendered document with pikepdf and pulls out the page count, the
document title and the text drawn on each page.  Used by the command line
to report what was written and by the tests to check the output.
"""
import io

import pikepdf

_TEXT_OPS = ("Tj", "'", '"')


class TextRun:
    def __init__(self, x, y, text):
        self.x = x            # text origin, points
        self.y = y            # baseline, points from the page bottom
        self.text = text

    def __repr__(self):
        return f"<TextRun {self.text!r} at ({self.x:.1f}, {self.y:.1f})>"


class DocumentSummary:
    def __init__(self, page_count, page_texts, title="", page_runs=None):
        self.page_count = page_count
        self.page_texts = page_texts      # one list of strings per page
        self.title = title
        self.page_runs = page_runs or [[] for _ in page_texts]

    def text(self):
        return "\n".join("\n".join(t) for t in self.page_texts)


def _operand_text(obj):
    if isinstance(obj, pikepdf.String):
        return bytes(obj).decode("latin-1")
    return ""


def page_runs(page):
    """Text runs with the origin set by the last ``Tm``/``Td`` before them."""
    out = []
    x = y = 0.0
    for operands, operator in pikepdf.parse_content_stream(page):
        op = str(operator)
        if op == "BT":
            x = y = 0.0
        elif op == "Tm" and len(operands) == 6:
            x, y = float(operands[4]), float(operands[5])
        elif op in ("Td", "TD") and len(operands) == 2:
            x += float(operands[0])
            y += float(operands[1])
        elif op in _TEXT_OPS and operands:
            out.append(TextRun(x, y, _operand_text(operands[-1])))
        elif op == "TJ" and operands:
            out.append(TextRun(x, y, "".join(_operand_text(o) for o in operands[0])))
    return [r for r in out if r.text]


def page_text(page):
    return [r.text for r in page_runs(page)]


def inspect_document(data):
    with pikepdf.open(io.BytesIO(data)) as pdf:
        title = str(pdf.docinfo.get("/Title", ""))
        runs = [page_runs(page) for page in pdf.pages]
        texts = [[r.text for r in page] for page in runs]
        return DocumentSummary(len(pdf.pages), texts, title, runs)
