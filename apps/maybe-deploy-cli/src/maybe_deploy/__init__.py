"""maybe-deploy: single-host installer for Maybe Finance."""

__version__ = "0.1.0"
