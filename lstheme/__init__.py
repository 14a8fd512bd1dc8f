"""Terminal styles, glob colour mappings and themes built from LS_COLORS and EXA_COLORS."""

__version__ = "0.1.0"

__all__ = ["lsc", "patterns", "style", "theme", "ui_styles"]