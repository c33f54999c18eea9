"""Leave engine - employee time-off requests with overlap and balance guarantees."""

__version__ = "0.1.0"
