"""license-check: verify that project dependencies declare a license."""

__version__ = "0.1.0"
