"""Binary tree, binary search tree and graph algorithms on plain Python objects."""

__version__ = "0.1.0"