"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for the cypress-mcp CLI."""

    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    INFO = "cyan"
    INFO_BOLD = "bold cyan"
    HEADER = "bold"
    DIM = "grey62"

    # Table columns
    COLUMN_ID = "cyan"
    COLUMN_PATH = "white"
    COLUMN_NUMBER = "magenta"


theme = Theme()
