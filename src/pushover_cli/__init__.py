"""Send Pushover notifications from the command line."""

__version__ = "0.1.3"
