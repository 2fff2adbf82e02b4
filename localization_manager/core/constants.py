# --- Constants ---

# File discovery
# Matches every TypeScript source file below any `src` directory
DEFAULT_PATTERN = "**/src/**/*.ts"

# Recognized call sites (compared against the exact callee source text)
LOCALIZE_CALL_NAME = "nls.localize"
LOCALIZED_COMMAND_CALL_NAME = "Command.toLocalizedCommand"

# Only these properties of a command object literal carry translations
COMMAND_RELEVANT_PROPERTIES = ("id", "label", "category")

# Translation keys
KEY_SEPARATOR = "/"

# Output
JSON_INDENT = 4
DEFAULT_OUTPUT = "nls.json"
DEFAULT_CONFIG_FILE = "nls-extract.json"

# Grammar selection by file suffix.
# The TSX grammar also covers plain and JSX JavaScript.
TYPESCRIPT_SUFFIXES = (".ts", ".mts", ".cts")
TSX_SUFFIXES = (".tsx", ".js", ".jsx", ".mjs", ".cjs")

# Two-character escapes resolved on top of the literal's cooked value
UNESCAPE_MAP = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}
