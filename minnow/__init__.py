"""A bounded in-memory byte stream with writer and reader views."""

__version__ = "0.1.0"
__all__ = ["byte_stream"]