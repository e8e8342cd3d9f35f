"""safelog -- sensitive-data classification and redaction for log output."""

__version__ = "0.1.0"
