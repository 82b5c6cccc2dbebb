"""File and directory helpers, a Java-style map and runtime platform detection."""

__version__ = "0.1.0"
