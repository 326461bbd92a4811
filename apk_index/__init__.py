"""Build step that lists APK releases on a static download page."""

__version__ = "0.1.0"
