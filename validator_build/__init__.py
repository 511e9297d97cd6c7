"""Build automation for the glTF validator."""

__version__ = "0.1.0"
