# chatificial/config.py

APP_NAME = "Chatificial"
APP_AUTHOR = "Chatificial"

# Persisted settings (user config dir)
SETTINGS_FILENAME = "settings.json"
DEFAULT_MAX_TOTAL_CHARS = 20_000

# Overflow destination, overwritten on every overflow
SCRATCH_FILE_NAME = "chatificial.content.md"
SCRATCH_DIR_NAME = "scratches"

# Folder names treated as build output / tooling state and never descended into
EXCLUDED_FOLDER_NAMES_DEFAULT = frozenset({
    "venv",
    ".venv",
    "__pycache__",
    ".git",
    ".hg",
    ".svn",
    ".idea",
    ".vscode",
    ".gradle",
    ".mypy_cache",
    ".pytest_cache",
    "build",
    "dist",
    "out",
    "node_modules",
})

# Known binary file extensions
BINARY_FILE_EXTENSIONS = {
    # Compiled/Object files
    ".pyc", ".pyo", ".pyd", ".o", ".a", ".so", ".lib", ".dll", ".exe", ".class", ".dylib",
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".tif", ".tiff", ".webp",
    # Archives
    ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".jar", ".war",
    # Documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    # Audio/Video
    ".mp3", ".wav", ".ogg", ".flac", ".mp4", ".mov", ".avi", ".mkv",
    # Fonts
    ".ttf", ".otf", ".woff", ".woff2",
    # Other
    ".db", ".sqlite", ".sqlite3", ".dat", ".bin",
}

# Bytes sniffed from the head of a file to classify it
BINARY_SNIFF_BYTES = 8192

# User-facing messages
MSG_NO_TEXT_FILES_FOUND = "No text files found in the selection."
MSG_COPIED_TO_CLIPBOARD = "Copied {0} characters to the clipboard."
MSG_TOO_LARGE_SAVED_AND_OPENED = (
    "Content is too large for the clipboard ({0} characters, limit {1}). "
    "Saved to a scratch file and opened it."
)
MSG_COULD_NOT_READ_FILE_CONTENT = "[Could not read file content]"
MSG_FAILED_TO_CREATE_SCRATCH = "Failed to create scratch file {0}"
