"""
Form model
----------
Read-only snapshots of a form definition, signature records and company
settings.  ``from_dict`` accepts the JSON shapes written by the form editor
and tolerates missing keys: a broken block degrades to an empty one instead
of failing the render.
"""
import logging

log = logging.getLogger(__name__)


# ── field types ───────────────────────────────────────────────────────────────
SHORT_TEXT = "short_text"
LONG_TEXT = "long_text"
NUMBER = "number"
DATE = "date"
CHECKBOX = "checkbox"
RADIO = "radio"
MULTI_CHOICE = "multi_choice"
DROPDOWN = "dropdown"

FIELD_TYPES = (
    SHORT_TEXT, LONG_TEXT, NUMBER, DATE,
    CHECKBOX, RADIO, MULTI_CHOICE, DROPDOWN,
)


def _text(value):
    return "" if value is None else str(value)


# ── blocks ────────────────────────────────────────────────────────────────────
class Block:
    kind = ""

    def __init__(self, id="", title="", description=None):
        self.id = _text(id)
        self.title = _text(title)
        self.description = description or None

    def __repr__(self):
        return f"<{type(self).__name__} {self.title!r}>"


class Group(Block):
    kind = "group"

    def __init__(self, id="", title="", description=None, children=None):
        Block.__init__(self, id, title, description)
        self.children = list(children or [])


class Field(Block):
    kind = "field"

    def __init__(self, id="", title="", description=None,
                 field_type=SHORT_TEXT, required=False, options=None,
                 validation=None):
        Block.__init__(self, id, title, description)
        if field_type not in FIELD_TYPES:
            log.warning("field %r has unknown type %r, treating as %s",
                        self.title, field_type, SHORT_TEXT)
            field_type = SHORT_TEXT
        self.field_type = field_type
        self.required = bool(required)
        self.options = list(options or [])
        self.validation = dict(validation or {})


class Signature(Block):
    kind = "signature"

    def __init__(self, id="", title="", description=None, requires_date=True):
        Block.__init__(self, id, title, description)
        self.requires_date = bool(requires_date)


def _shallow_block(d):
    if not isinstance(d, dict):
        log.warning("skipping non-mapping block %r", d)
        return None
    kind = d.get("type")
    common = dict(id=d.get("id", ""), title=d.get("title", ""),
                  description=d.get("description"))
    if kind == Group.kind:
        return Group(**common)
    if kind == Field.kind:
        return Field(field_type=d.get("fieldType", SHORT_TEXT),
                     required=d.get("required", False),
                     options=d.get("options"),
                     validation=d.get("validation"), **common)
    if kind == Signature.kind:
        requires_date = d.get("requiresDate", d.get("includeDate", True))
        return Signature(requires_date=requires_date, **common)
    log.warning("skipping block %r with unknown type %r", common["title"], kind)
    return None


def block_from_dict(d):
    """Build a block from its dict form; None when the type is unknown."""
    block = _shallow_block(d)
    if isinstance(block, Group):
        block.children = blocks_from_list(d.get("children"))
    return block


def blocks_from_list(items):
    """Build a block list, children included, without recursing per level."""
    out = []
    pending = [(items, out)]
    while pending:
        source, target = pending.pop()
        for item in source or []:
            b = _shallow_block(item)
            if b is None:
                continue
            target.append(b)
            if isinstance(b, Group):
                pending.append((item.get("children"), b.children))
    return out


# ── form ──────────────────────────────────────────────────────────────────────
class Form:
    def __init__(self, title="", blocks=None, description=None, revision="1.0"):
        self.title = _text(title)
        self.blocks = list(blocks or [])
        self.description = description or None
        self.revision = _text(revision) or "1.0"

    @classmethod
    def from_dict(cls, d):
        d = d or {}
        return cls(
            title=d.get("title", ""),
            blocks=blocks_from_list(d.get("blocks")),
            description=d.get("description"),
            revision=d.get("revision", d.get("revisionLabel")) or "1.0",
        )


# ── signatures & company ──────────────────────────────────────────────────────
class SignatureRecord:
    def __init__(self, id, name="", title_or_role="", image_data=None):
        self.id = _text(id)
        self.name = _text(name)
        self.title_or_role = _text(title_or_role)
        self.image_data = image_data or None

    @classmethod
    def from_dict(cls, d):
        return cls(
            id=d.get("id", ""),
            name=d.get("name", ""),
            title_or_role=d.get("titleOrRole", d.get("title", "")),
            image_data=d.get("imageData"),
        )


class CompanySettings:
    def __init__(self, name="", address=None, phone=None, email=None,
                 website=None, vat_id=None, approval_no=None,
                 logo_image=None, legal_footer_text=None):
        self.name = _text(name)
        self.address = address or None
        self.phone = phone or None
        self.email = email or None
        self.website = website or None
        self.vat_id = vat_id or None
        self.approval_no = approval_no or None
        self.logo_image = logo_image or None
        self.legal_footer_text = legal_footer_text or None

    @classmethod
    def from_dict(cls, d):
        d = d or {}
        return cls(
            name=d.get("name", ""),
            address=d.get("address"),
            phone=d.get("phone"),
            email=d.get("email"),
            website=d.get("website"),
            vat_id=d.get("vatId", d.get("vatEori")),
            approval_no=d.get("approvalNo", d.get("easaApprovalNo")),
            logo_image=d.get("logoImage", d.get("logoData")),
            legal_footer_text=d.get("legalFooterText", d.get("legalText")),
        )

    def contact_lines(self):
        lines = []
        if self.address:
            lines.extend(l.strip() for l in str(self.address).splitlines() if l.strip())
        if self.phone:
            lines.append(f"Phone: {self.phone}")
        if self.email:
            lines.append(f"Email: {self.email}")
        if self.website:
            lines.append(str(self.website))
        if self.vat_id:
            lines.append(f"VAT: {self.vat_id}")
        if self.approval_no:
            lines.append(f"Approval No.: {self.approval_no}")
        return lines


# ── coercion ──────────────────────────────────────────────────────────────────
def as_form(form):
    return form if isinstance(form, Form) else Form.from_dict(form)


def as_signatures(signatures):
    out = []
    for s in signatures or []:
        out.append(s if isinstance(s, SignatureRecord) else SignatureRecord.from_dict(s))
    return out


def as_company(settings):
    if settings is None or isinstance(settings, CompanySettings):
        return settings
    return CompanySettings.from_dict(settings)
