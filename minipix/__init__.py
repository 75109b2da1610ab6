"""Character, number, string and line helpers, X11 colour names, and XPM decoding into in-memory pixel images."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "image",
    "lines",
    "numbers",
    "pixelformat",
    "strings",
    "xpm",
]