"""
Text helpers
------------
Font selection, width-exact word wrapping and single-line fitting on a
reportlab canvas.  Sizes are in points; positions are reportlab points.
"""
from reportlab.pdfbase.pdfmetrics import stringWidth

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FONT_ITALIC = "Helvetica-Oblique"

_FONTS = {"normal": FONT, "bold": FONT_BOLD, "italic": FONT_ITALIC}


def font_name(weight):
    return _FONTS.get(weight, FONT)


def set_font(c, weight, size):
    c.setFont(font_name(weight), max(size, 5.0))


def text_width(txt, weight, size):
    return stringWidth(str(txt), font_name(weight), size)


# ── wrapping ──────────────────────────────────────────────────────────────────
def _split_word(word, fname, size, max_w):
    parts, cur = [], ""
    for ch in word:
        if cur and stringWidth(cur + ch, fname, size) > max_w:
            parts.append(cur)
            cur = ch
        else:
            cur += ch
    if cur:
        parts.append(cur)
    return parts


def wrap_text(txt, weight, size, max_w):
    """Greedy word wrap; every returned line measures at most ``max_w``."""
    fname = font_name(weight)
    lines = []
    for para in str(txt).replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        words = para.split()
        if not words:
            lines.append("")
            continue
        cur = ""
        for word in words:
            trial = f"{cur} {word}" if cur else word
            if stringWidth(trial, fname, size) <= max_w:
                cur = trial
                continue
            if cur:
                lines.append(cur)
            if stringWidth(word, fname, size) <= max_w:
                cur = word
            else:
                pieces = _split_word(word, fname, size, max_w)
                lines.extend(pieces[:-1])
                cur = pieces[-1]
        lines.append(cur)
    return lines


def fit_text(txt, weight, size, max_w):
    """Trim ``txt`` from the right until it fits on one line."""
    s = str(txt)
    fname = font_name(weight)
    if stringWidth(s, fname, size) <= max_w:
        return s
    lo, hi = 1, len(s)
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if stringWidth(s[:mid] + "...", fname, size) <= max_w:
            lo = mid
        else:
            hi = mid - 1
    return s[:lo] + "..."


# ── drawing ───────────────────────────────────────────────────────────────────
def draw_text(c, txt, x, y, size, weight="normal", halign="left"):
    if not txt:
        return
    set_font(c, weight, size)
    if halign == "right":
        c.drawRightString(x, y, txt)
    elif halign == "center":
        c.drawCentredString(x, y, txt)
    else:
        c.drawString(x, y, txt)
