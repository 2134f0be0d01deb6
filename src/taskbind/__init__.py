"""taskbind - bind pipeline resources to task specifications."""

__version__ = "0.1.0"
