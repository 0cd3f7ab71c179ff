"""Generate Python type stub files from declared type metadata of extension modules."""

__version__ = "0.7.1"