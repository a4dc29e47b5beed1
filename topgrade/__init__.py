"""Distribution detection, executable lookup, terminal reporting and upgrade command lines."""

__version__ = "8.2.0"