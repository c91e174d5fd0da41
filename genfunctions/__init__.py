"""Helpers for string lists, trimming, splitting, typed input, file reading and a demo command."""

__version__ = "0.1.0"
__all__ = ["chararray", "text", "prompt", "readfile", "demo"]