import plotly.io as pio

# -----------------------------
# THEME CONSTANTS
# -----------------------------
BG          = "#0a0b0d"          # Page background
PANEL       = "#12141a"          # Chart panel
BORDER      = "rgba(255,255,255,0.06)"
TEXT        = "#f4f4f5"
TEXT_DIM    = "#71717a"
TEXT_BRIGHT = "#fafafa"

ACCENT      = "#10b981"          # Active axis label
GRID_LINE   = "rgba(255,255,255,0.08)"
MARKER_TEXT = "#0a0b0d"          # State abbreviation inside the circle

CARD_SHADOW = "0 4px 24px rgba(0,0,0,0.4)"
FONT_FAMILY = "'Inter', system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"

pio.templates.default = "plotly_dark"

EXTERNAL_CSS = ['https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap']

INDEX_STRING = """
<!DOCTYPE html>
<html>
<head>
    {%metas%}
    <title>{%title%}</title>
    {%css%}
    <style>
    * { box-sizing: border-box; }
    body { margin: 0; padding: 0; background: #0a0b0d; overflow: hidden; }

    /* Axis labels double as the metric pickers */
    .axis-label {
        cursor: pointer;
        user-select: none;
        font-size: 15px;
        padding: 3px 6px;
        white-space: nowrap;
        transition: color 0.2s ease;
    }
    .axis-label.active { color: #10b981; font-weight: 700; cursor: default; }
    .axis-label.inactive { color: #71717a; font-weight: 400; }
    .axis-label.inactive:hover { color: #f4f4f5; }

    .y-labels {
        writing-mode: vertical-rl;
        transform: rotate(180deg);
        display: flex;
        justify-content: center;
        gap: 4px;
    }
    .x-labels {
        display: flex;
        flex-direction: column;
        align-items: center;
        gap: 2px;
    }
    </style>
    {%favicon%}
</head>
<body>
    {%app_entry%}
    <footer>
        {%config%}
        {%scripts%}
        {%renderer%}
    </footer>
</body>
</html>
"""

PAGE_STYLE = {"background": BG, "color": TEXT, "minHeight": "100vh", "fontFamily": FONT_FAMILY}

CHART_GRID_STYLE = {
    "display": "grid",
    "gridTemplateColumns": "auto 1fr",
    "gridTemplateRows": "1fr auto",
    "background": PANEL,
    "border": f"1px solid {BORDER}",
    "borderRadius": "14px",
    "boxShadow": CARD_SHADOW,
    "padding": "12px",
    "height": "100vh",
}
