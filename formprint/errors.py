"""
Render errors
-------------
Hard failures that abort a render. Everything recoverable (bad dates,
broken images, unknown signatures) is handled where it happens.
"""


class RenderError(Exception):
    pass


class PageGeometryError(RenderError, ValueError):
    """Page size and margins leave no room for content."""


class InputError(RenderError, ValueError):
    """An input file could not be read or parsed."""
