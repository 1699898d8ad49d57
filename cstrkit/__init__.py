"""C-style string, memory and formatting routines."""

__version__ = "0.1.0"
__all__ = ["formatting", "memory", "strings", "transform"]