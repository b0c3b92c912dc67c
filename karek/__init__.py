"""Personal spending tracker with a simple 24-hour clock and FIFO queue."""

__version__ = "1.0.0"
__all__ = ["clock", "fifo", "tracker"]