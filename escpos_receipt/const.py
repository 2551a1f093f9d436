# Profile dictionary keys
CONF_NAME = "name"
CONF_COLS = "cols"
CONF_CAPABILITIES = "capabilities"
CONF_QUIRKS = "quirks"

# Capability flags
CAP_ALIGN = "align"
CAP_BOLD = "bold"
CAP_UNDERLINE = "underline"
CAP_DOUBLE_WIDTH = "double_width"
CAP_DOUBLE_HEIGHT = "double_height"
CAP_CUT = "cut"
CAP_PARTIAL_CUT = "partial_cut"
CAP_QR_CODE = "qr_code"
CAP_BEEP = "beep"

CAPABILITY_FLAGS: list[str] = [
    CAP_ALIGN,
    CAP_BOLD,
    CAP_UNDERLINE,
    CAP_DOUBLE_WIDTH,
    CAP_DOUBLE_HEIGHT,
    CAP_CUT,
    CAP_PARTIAL_CUT,
    CAP_QR_CODE,
    CAP_BEEP,
]

# Quirk keys
QUIRK_MAX_LINE_LENGTH = "max_line_length"
QUIRK_NEEDS_CRLF = "needs_crlf"
QUIRK_BROKEN_BOLD_COMMAND = "broken_bold_command"
QUIRK_NEEDS_INIT_BEFORE_EVERY_PRINT = "needs_init_before_every_print"
QUIRK_EXTRA_FEED_BEFORE_CUT = "extra_feed_before_cut"
QUIRK_ALTERNATIVE_CUT_COMMAND = "alternative_cut_command"

# Default values
DEFAULT_PROFILE = "generic"
DEFAULT_LINE_WIDTH = 48
DEFAULT_FEED_BEFORE_CUT = 3
DEFAULT_ALIGN = "left"
DEFAULT_RULE_STYLE = "dashed"
DEFAULT_CODEPAGE = "ISO_8859-1"
DEFAULT_QR_SIZE = 6

# Narrowest column the table allocator hands out
MIN_COLUMN_WIDTH = 4

# ESC d n takes a single byte
MAX_FEED_LINES = 255

CURRENCY_PREFIX = "R$"
DECIMAL_SEPARATOR = ","
FILL_CHAR = "."

RULE_CHARS: dict[str, str] = {
    "dashed": "-",
    "solid": "_",
    "double": "=",
}

ALIGN_CHOICES: list[str] = ["left", "center", "right"]
