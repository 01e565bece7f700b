"""
Colours, type sizes and the group heading tiers.
"""
from reportlab.lib import colors

BRAND_PRIMARY = colors.HexColor("#0064B2")
LIGHT_GRAY = colors.HexColor("#E6E9ED")
NEAR_WHITE = colors.HexColor("#F4F7FB")
TEXT = colors.black
TEXT_MUTED = colors.HexColor("#555555")
DIVIDER = colors.HexColor("#B0B7C0")

BODY_SIZE = 10
SMALL_SIZE = 8
LEGAL_SIZE = 7


class GroupStyle:
    def __init__(self, background, text_color, font_size, bar_height_mm):
        self.background = background
        self.text_color = text_color
        self.font_size = font_size
        self.bar_height_mm = bar_height_mm


# depth 0, depth 1, depth 2 and deeper
GROUP_STYLES = (
    GroupStyle(BRAND_PRIMARY, colors.white, 12, 10.0),
    GroupStyle(LIGHT_GRAY, BRAND_PRIMARY, 11, 10.0),
    GroupStyle(NEAR_WHITE, TEXT, 10, 8.0),
)


def group_style(depth):
    return GROUP_STYLES[min(max(depth, 0), len(GROUP_STYLES) - 1)]
