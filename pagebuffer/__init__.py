"""Page-file storage and a buffer pool with FIFO, LRU, LRU-K, CLOCK and LFU replacement."""

__version__ = "0.1.0"

__all__ = ["buffer", "errors", "replacement", "stats", "storage"]