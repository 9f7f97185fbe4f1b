"""Data structures, problem protocol and measurement helpers shared by every search."""
