"""
Configuration constants for Photo Sidebar.
"""

CONFIG = {
    "APP_NAME": "Photo Sidebar",
    "APP_VERSION": "1.1.0",
    "WINDOW_SIZE": (1100, 760),

    # Panel / command identifiers
    "PANEL_ID": "external-photo-sidebar-view",
    "PANEL_TITLE": "Photos",
    "OPEN_COMMAND_ID": "open-external-photo-sidebar",
    "OPEN_COMMAND_NAME": "Open Photo Sidebar",

    # Supported images
    "IMAGE_EXTENSIONS": {'.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.svg'},
    "CONTENT_TYPES": {
        '.jpg': 'image/jpeg',
        '.jpeg': 'image/jpeg',
        '.png': 'image/png',
        '.gif': 'image/gif',
        '.bmp': 'image/bmp',
        '.webp': 'image/webp',
        '.svg': 'image/svg+xml',
    },
    "DEFAULT_CONTENT_TYPE": 'application/octet-stream',

    # Gallery settings
    "DEFAULT_SETTINGS": {"folderPath": "", "recursive": True, "thumbSize": 96},
    "THUMB_SIZE_MIN": 64,
    "THUMB_SIZE_MAX": 256,
    "THUMB_SIZE_STEP": 4,
    "THUMB_ASPECT": 1.4,  # book-like box height multiplier

    # Loading and watching
    "MAX_MATERIALIZE_SIZE": 100 * 1024 * 1024,
    "WATCH_DEBOUNCE_MS": 250,
    "NOTICE_TIMEOUT_MS": 4000,

    # Full view
    "VIEWER_SCREEN_FRACTION": 0.92,
    "VIEWER_ZOOM_STEP": 0.1,
    "VIEWER_MIN_ZOOM": 0.1,
    "VIEWER_MAX_ZOOM": 8.0,
}


def parse_human_size(size_bytes: int) -> str:
    """Format a byte count into a human-readable string."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in ("KB", "MB", "GB", "TB"):
        size /= 1024.0
        if size < 1024.0 or unit == "TB":
            return f"{size:.1f} {unit}"
