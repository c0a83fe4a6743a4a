"""Small utilities: flags, byte arrays, timers, logging, colours, paths, URLs, files, memory maps and key codes."""

__version__ = "0.1.0"

__all__ = [
    "byte_array",
    "color",
    "dir",
    "elapsed_timer",
    "file",
    "file_mapper",
    "flags",
    "keys",
    "log",
    "scancodes",
    "tailwind_colors",
    "url",
]