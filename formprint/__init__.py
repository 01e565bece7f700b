"""
formprint
---------
Renders a filled-in form definition to a paginated A4 PDF.
"""
from .document import render_document
from .errors import InputError, PageGeometryError, RenderError
from .model import (
    CompanySettings, Field, Form, Group, Signature, SignatureRecord,
)
from .readback import inspect_document
from .sample import render_sample_document

__all__ = [
    "render_document", "render_sample_document", "inspect_document",
    "Form", "Group", "Field", "Signature", "SignatureRecord", "CompanySettings",
    "RenderError", "PageGeometryError", "InputError",
]
