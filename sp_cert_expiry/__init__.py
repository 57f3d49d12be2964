"""Service principal certificate expiry report."""

__version__ = "1.0.0"
