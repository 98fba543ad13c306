"""Terminal browser for the UniFi firmware catalog."""

__version__ = "0.3.0"
