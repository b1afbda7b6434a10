"""Shared ANSI constants for the resume viewer."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

CLEAR_SCREEN = f"{CSI}2J"
CURSOR_HOME = f"{CSI}H"

# SGR attribute on/off pairs
BOLD_ON = f"{CSI}1m"
BOLD_OFF = f"{CSI}22m"
UNDERLINE_ON = f"{CSI}4m"
UNDERLINE_OFF = f"{CSI}24m"
FG_RESET = f"{CSI}39m"

# Foreground colors (SGR 30-37)
FG_COLORS = {
    "green": f"{CSI}32m",
    "yellow": f"{CSI}33m",
    "blue": f"{CSI}34m",
    "magenta": f"{CSI}35m",
    "cyan": f"{CSI}36m",
}

# Band palette, indexed by band % len(BAND_PALETTE)
BAND_PALETTE: tuple[str, ...] = ("green", "cyan", "yellow", "blue", "magenta")

# Box drawing glyphs used for rules and the band gutter
RULE_CHAR = "\u2500"    # Light horizontal
GUTTER_BAR = "\u2502"   # Light vertical

# Columns reserved for the band-label gutter (" 2014 │ ")
GUTTER_WIDTH = 8
