"""
Constants shared by the lookup, display and CLI layers.
"""

# ============================================================================
# Matching
# ============================================================================

# Largest Levenshtein distance accepted for a fuzzy name match
FUZZY_THRESHOLD = 3

# Atomic numbers are parsed as unsigned 32-bit integers
MAX_ATOMIC_NUMBER_QUERY = 2**32 - 1

# ============================================================================
# Display
# ============================================================================

# Upper bound for wrapped value width (characters)
MAX_WIDTH = 80

# Wrapped values never get narrower than this, however small the terminal
MIN_WRAP_WIDTH = 20

# Terminal size used when the real one cannot be determined
FALLBACK_COLUMNS = 80

PROMPT = "Name, Symbol or Number"

# ============================================================================
# ANSI styling
# ============================================================================

STYLE_BOLD = "\033[1m"
STYLE_RESET = "\033[0m"
FG_RESET = "\033[39m"

FG_COLORS = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
