"""
Block rendering
---------------
Walks the form's block tree and draws each Group, Field and Signature at the
cursor.  Every atomic unit asks the cursor for its whole height first, so a
field or signature is never split across a page boundary.
"""
import logging
from datetime import date

from reportlab.lib.units import mm

from .drawing import draw_text, fit_text, text_width, wrap_text
from .formatting import DATE_FORMAT, format_value
from .images import fit_box, load_image
from .model import LONG_TEXT, Field, Group, Signature
from .style import BODY_SIZE, TEXT, TEXT_MUTED, group_style

log = logging.getLogger(__name__)

LINE_MM = 5.0
BASELINE_MM = 4.0          # first baseline below the top of a row
INLINE_ROW_MM = 6.0
WRAP_PAD_MM = 2.0
WRAP_THRESHOLD = 40        # characters
FIELD_MIN_MM = 15.0
FIELD_INSET_MM = 2.0
LABEL_COL_MM = 60.0

SIGNATURE_MIN_MM = 30.0
SIGNATURE_IMG_W_MM = 60.0
SIGNATURE_IMG_H_MM = 25.0
SIGNATURE_GAP_MM = 10.0

GROUP_DESC_SIZE = 9
GROUP_DESC_LINE_MM = 4.5
GROUP_GAP_MM = 5.0

SIGNATURE_PLACEHOLDER = "[Signature]"
SIGNATURE_IMAGE_FAILED = "[Signature Image]"
NOT_SIGNED = "Not signed"


def child_number(parent, index):
    """'1', 2 -> '1.2.';  '1.2.', 3 -> '1.2.3.'"""
    return f"{parent.rstrip('.')}.{index}."


def pt_to_mm(pt):
    return pt / mm


class BlockRenderer:
    def __init__(self, cursor, answers=None, signatures=None, generated_on=None):
        self.cursor = cursor
        self.answers = answers or {}
        self.signatures = {}
        for rec in signatures or []:
            self.signatures.setdefault(rec.id, rec)
        self.generated_on = generated_on or date.today()
        self._dispatch = {
            Group: self.render_group,
            Field: self.render_field,
            Signature: self.render_signature,
        }

    @property
    def cv(self):
        return self.cursor.cv

    def render_blocks(self, blocks):
        """Draw ``blocks`` depth-first in document order.

        Groups are walked with an explicit stack of ``(block, number, depth)``
        frames, so nesting depth is not limited by the interpreter's
        recursion limit.  A ``None`` frame closes a group.
        """
        stack = [(b, str(i), 0) for i, b in reversed(list(enumerate(blocks, 1)))]
        while stack:
            block, number, depth = stack.pop()
            if block is None:
                self.cursor.advance(GROUP_GAP_MM)
                continue
            self.render(block, number, depth)
            if type(block) is Group:
                stack.append((None, number, depth))
                children = list(enumerate(block.children, 1))
                for i, child in reversed(children):
                    stack.append((child, child_number(number, i), depth + 1))

    def render(self, block, number, depth):
        fn = self._dispatch.get(type(block))
        if fn is None:
            log.warning("no renderer for %r, skipped", block)
            return
        fn(block, number, depth)

    def answer(self, block):
        # answers are keyed by title; two blocks sharing a title share a value
        return self.answers.get(block.title)

    # ── group ─────────────────────────────────────────────────────────────────
    def render_group(self, group, number, depth):
        cur = self.cursor
        g = cur.geometry
        c = self.cv
        style = group_style(depth)
        width = g.content_width_mm

        desc_lines = []
        if group.description:
            desc_lines = wrap_text(group.description, "normal", GROUP_DESC_SIZE,
                                   (width - 2 * FIELD_INSET_MM) * mm)
        desc_h = len(desc_lines) * GROUP_DESC_LINE_MM + 1.0 if desc_lines else 0.0
        bar_h = style.bar_height_mm
        cur.ensure_space(bar_h + 2.0 + desc_h)

        c.saveState()
        c.setFillColor(style.background)
        c.rect(g.left * mm, cur.pdf_y(cur.y + bar_h), width * mm, bar_h * mm,
               fill=1, stroke=0)
        c.restoreState()
        heading = f"{number} {group.title}".strip()
        heading = fit_text(heading, "bold", style.font_size,
                           (width - 2 * FIELD_INSET_MM - 2.0) * mm)
        baseline = cur.y + bar_h / 2.0 + pt_to_mm(style.font_size) * 0.35
        c.setFillColor(style.text_color)
        draw_text(c, heading, (g.left + FIELD_INSET_MM + 1.0) * mm,
                  cur.pdf_y(baseline), style.font_size, "bold")
        c.setFillColor(TEXT)
        cur.advance(bar_h + 2.0)

        if desc_lines:
            c.setFillColor(TEXT_MUTED)
            for line in desc_lines:
                if cur.remaining() < GROUP_DESC_LINE_MM:
                    cur.new_page()
                    c.setFillColor(TEXT_MUTED)
                draw_text(c, line, (g.left + FIELD_INSET_MM) * mm,
                          cur.pdf_y(cur.y + 3.5), GROUP_DESC_SIZE)
                cur.advance(GROUP_DESC_LINE_MM)
            c.setFillColor(TEXT)
            cur.advance(1.0)

        log.debug("group %s %r at depth %d", number, group.title, depth)

    # ── field ─────────────────────────────────────────────────────────────────
    def field_layout(self, field):
        """Return ``(label_lines, value_lines, wrapped, height_mm)``."""
        g = self.cursor.geometry
        text = format_value(field.field_type, self.answer(field))
        label_lines = wrap_text(f"{field.title}:", "bold", BODY_SIZE,
                                (LABEL_COL_MM - 3.0) * mm)
        value_w = (g.right - g.left - FIELD_INSET_MM - LABEL_COL_MM) * mm
        wrapped = (len(text) > WRAP_THRESHOLD
                   or field.field_type == LONG_TEXT
                   or "\n" in text
                   or text_width(text, "normal", BODY_SIZE) > value_w)
        if wrapped:
            value_lines = wrap_text(text, "normal", BODY_SIZE, value_w)
            rows = max(len(label_lines), len(value_lines))
            height = rows * LINE_MM + WRAP_PAD_MM
        else:
            value_lines = [text]
            if len(label_lines) == 1:
                height = INLINE_ROW_MM
            else:
                height = len(label_lines) * LINE_MM + 1.0
        return label_lines, value_lines, wrapped, height

    def render_field(self, field, number, depth):
        cur = self.cursor
        g = cur.geometry
        c = self.cv
        label_lines, value_lines, wrapped, height = self.field_layout(field)
        cur.ensure_space(max(FIELD_MIN_MM, height))

        label_x = (g.left + FIELD_INSET_MM) * mm
        value_x = (g.left + FIELD_INSET_MM + LABEL_COL_MM) * mm
        rows = max(len(label_lines), len(value_lines))
        start = cur.y
        c.setFillColor(TEXT)
        for i in range(rows):
            if cur.remaining() < LINE_MM:
                # taller than a whole page: carry on below the next header
                cur.new_page()
            base = cur.pdf_y(cur.y + BASELINE_MM)
            if i < len(label_lines):
                draw_text(c, label_lines[i], label_x, base, BODY_SIZE, "bold")
            if i < len(value_lines):
                draw_text(c, value_lines[i], value_x, base, BODY_SIZE)
            cur.advance(LINE_MM)
        if wrapped:
            cur.advance(WRAP_PAD_MM)
        elif rows == 1:
            cur.advance(INLINE_ROW_MM - LINE_MM)
        else:
            cur.advance(1.0)
        log.debug("field %r: %d row(s), %.1fmm", field.title, rows, cur.y - start)

    # ── signature ─────────────────────────────────────────────────────────────
    def load_signature_image(self, rec):
        """``(reader, w_mm, h_mm)`` or None when the image can't be read."""
        try:
            reader, size = load_image(rec.image_data)
        except (OSError, ValueError) as exc:
            log.warning("signature image for %r unreadable: %s", rec.id, exc)
            return None
        w, h = fit_box(size, SIGNATURE_IMG_W_MM, SIGNATURE_IMG_H_MM)
        return reader, w, h

    def render_signature(self, block, number, depth):
        cur = self.cursor
        g = cur.geometry
        c = self.cv
        value = self.answer(block)
        rec = self.signatures.get(str(value)) if value not in (None, "") else None

        image = None
        if rec is not None and rec.image_data:
            image = self.load_signature_image(rec)

        height = INLINE_ROW_MM * 2
        if rec is not None:
            height += image[2] + 2.0 if image else INLINE_ROW_MM
            if block.requires_date:
                height += INLINE_ROW_MM
        cur.ensure_space(max(SIGNATURE_MIN_MM, height))

        x = (g.left + FIELD_INSET_MM) * mm
        c.setFillColor(TEXT)
        draw_text(c, block.title, x, cur.pdf_y(cur.y + BASELINE_MM), BODY_SIZE, "bold")
        cur.advance(INLINE_ROW_MM)

        if rec is None:
            draw_text(c, NOT_SIGNED, x, cur.pdf_y(cur.y + BASELINE_MM), BODY_SIZE, "italic")
            cur.advance(INLINE_ROW_MM)
        else:
            draw_text(c, f"Signatory: {rec.name} - {rec.title_or_role}", x,
                      cur.pdf_y(cur.y + BASELINE_MM), BODY_SIZE)
            cur.advance(INLINE_ROW_MM)
            self.draw_signature_image(rec, image, x)
            if block.requires_date:
                stamp = self.generated_on.strftime(DATE_FORMAT)
                draw_text(c, f"Date: {stamp}", x, cur.pdf_y(cur.y + BASELINE_MM),
                          BODY_SIZE)
                cur.advance(INLINE_ROW_MM)
        cur.advance(SIGNATURE_GAP_MM)

    def draw_signature_image(self, rec, image, x):
        cur = self.cursor
        c = self.cv
        if not rec.image_data:
            placeholder = SIGNATURE_PLACEHOLDER
        elif image is None:
            placeholder = SIGNATURE_IMAGE_FAILED
        else:
            reader, w, h = image
            try:
                c.drawImage(reader, x, cur.pdf_y(cur.y + h), width=w * mm,
                            height=h * mm, mask="auto")
            except (OSError, ValueError) as exc:
                log.warning("signature image for %r not embedded: %s", rec.id, exc)
                placeholder = SIGNATURE_IMAGE_FAILED
            else:
                cur.advance(h + 2.0)
                return
        c.setFillColor(TEXT_MUTED)
        draw_text(c, placeholder, x, cur.pdf_y(cur.y + BASELINE_MM), BODY_SIZE)
        c.setFillColor(TEXT)
        cur.advance(INLINE_ROW_MM)
