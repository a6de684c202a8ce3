"""File I/O for 3a art files."""

from art3a.io.reader import load, loads
from art3a.io.writer import dumps, save

__all__ = ["load", "loads", "save", "dumps"]
