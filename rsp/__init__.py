"""Manage named SSH local port forwarding rules: store, start, stop and check them."""

__version__ = "0.1.1"