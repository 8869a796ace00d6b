"""
Excel colors, fonts, fills, borders and alignments for chart exports.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
SLATE = "0F172A"
INDIGO = "3730A3"
LIGHT_INDIGO = "EEF2FF"
ALTERNATE_ROW = "F8FAFC"
WHITE = "FFFFFF"
BLACK = "000000"
MUTED = "64748B"
OTHER_ROW_BG = "FEF3C7"
TOTAL_ROW_BG = "E0E7FF"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=SLATE)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=MUTED)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=INDIGO)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
KPI_VALUE_FONT = Font(name="Calibri", size=22, bold=True, color=INDIGO)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=MUTED)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=INDIGO, end_color=INDIGO, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")
OTHER_FILL = PatternFill(start_color=OTHER_ROW_BG, end_color=OTHER_ROW_BG, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=TOTAL_ROW_BG, end_color=TOTAL_ROW_BG, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color="CBD5E1"),
    right=Side(style="thin", color="CBD5E1"),
    top=Side(style="thin", color="CBD5E1"),
    bottom=Side(style="thin", color="CBD5E1"),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=INDIGO),
    right=Side(style="thin", color=INDIGO),
    top=Side(style="thin", color=INDIGO),
    bottom=Side(style="medium", color=INDIGO),
)
TOTAL_BORDER = Border(
    left=Side(style="thin", color="94A3B8"),
    right=Side(style="thin", color="94A3B8"),
    top=Side(style="medium", color="94A3B8"),
    bottom=Side(style="medium", color="94A3B8"),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# ---------------------------------------------------------------------------
# Highlight name → fill mapping
# ---------------------------------------------------------------------------
HIGHLIGHT_FILLS = {
    "other": OTHER_FILL,
}
