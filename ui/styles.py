"""
Styling constants and theme configuration for the pace tracker UI.
"""

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Lighter background (axes, panels)
TEXT_COLOR = "#EEEEEE"        # Main text
TEXT_COLOR_DIM = "#CCCCCC"    # Dimmed text (axis labels, etc.)
BORDER_COLOR = "#555555"      # Borders
GRID_COLOR = "#333333"        # Grid lines

# Light theme colors
LIGHT_BG_COLOR = "#FFFFFF"
LIGHT_BG_COLOR_DIM = "#F4F4F5"
LIGHT_TEXT_COLOR = "#18181B"
LIGHT_TEXT_COLOR_DIM = "#52525B"
LIGHT_BORDER_COLOR = "#D4D4D8"
LIGHT_GRID_COLOR = "#E4E4E7"

# Accent colors
ACCENT_BLUE = "#6FA8FF"       # Runner distance series, buttons
ACCENT_ORANGE = "#FF9F43"     # Reference series

# =============================================================================
# Chart Themes (consumed by RunChartCanvas)
# =============================================================================

CHART_THEMES = {
    "dark": {
        "figure": BG_COLOR,
        "axes": BG_COLOR_LIGHT,
        "spine": TEXT_COLOR_DIM,
        "text": TEXT_COLOR_DIM,
        "title": "#FFFFFF",
        "grid": GRID_COLOR,
        "distance": ACCENT_BLUE,
        "reference": ACCENT_ORANGE,
    },
    "light": {
        "figure": LIGHT_BG_COLOR,
        "axes": LIGHT_BG_COLOR,
        "spine": LIGHT_TEXT_COLOR_DIM,
        "text": LIGHT_TEXT_COLOR_DIM,
        "title": LIGHT_TEXT_COLOR,
        "grid": LIGHT_GRID_COLOR,
        "distance": "#2563EB",
        "reference": "#EA580C",
    },
}

# =============================================================================
# PyQt5 Stylesheets
# =============================================================================

_STYLESHEET_TEMPLATE = """
    QMainWindow, QWidget {{
        background-color: {bg};
        color: {text};
    }}
    QGroupBox {{
        border: 1px solid {border};
        border-radius: 4px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {text};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {text};
        font-size: 10pt;
    }}
    QLabel#dimLabel {{
        color: {text_dim};
    }}
    QLabel#speedLabel {{
        font-size: 18pt;
        font-weight: bold;
    }}
    QLineEdit {{
        background-color: {bg_dim};
        color: {text};
        border: 1px solid {border};
        border-radius: 4px;
        padding: 2px 4px;
    }}
    QPushButton {{
        background-color: {accent};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A98EF;
    }}
    QPushButton:pressed {{
        background-color: #4A88DF;
    }}
    QMenuBar {{
        background-color: {bg};
        color: {text};
        border-bottom: 1px solid {border};
    }}
    QMenuBar::item:selected {{
        background-color: {bg_dim};
    }}
"""

DARK_STYLESHEET = _STYLESHEET_TEMPLATE.format(
    bg=BG_COLOR,
    bg_dim=BG_COLOR_LIGHT,
    text=TEXT_COLOR,
    text_dim=TEXT_COLOR_DIM,
    border=BORDER_COLOR,
    accent=ACCENT_BLUE,
)

LIGHT_STYLESHEET = _STYLESHEET_TEMPLATE.format(
    bg=LIGHT_BG_COLOR,
    bg_dim=LIGHT_BG_COLOR_DIM,
    text=LIGHT_TEXT_COLOR,
    text_dim=LIGHT_TEXT_COLOR_DIM,
    border=LIGHT_BORDER_COLOR,
    accent="#2563EB",
)

STYLESHEETS = {
    "dark": DARK_STYLESHEET,
    "light": LIGHT_STYLESHEET,
}


def stylesheet_for(theme: str) -> str:
    """Qt stylesheet for a theme name ("dark" or "light")."""
    try:
        return STYLESHEETS[theme]
    except KeyError:
        raise ValueError(f"Unknown theme '{theme}'. Use 'dark' or 'light'.")
