"""Shared constants for terminal output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Box drawing characters
BOX = {
    "top_left": "┌",      # Light down and right
    "top_right": "┐",     # Light down and left
    "bottom_left": "└",   # Light up and right
    "bottom_right": "┘",  # Light up and left
    "vertical": "│",      # Light vertical
    "horizontal": "─",    # Light horizontal
    "empty": " ",
}
