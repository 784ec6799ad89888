"""Helpers for Core Rule Set checkouts: configuration, root discovery, regex-assembly checks and regex comparison."""

__version__ = "2.0.0"