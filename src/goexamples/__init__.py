"""Go example hovers: token under cursor → package path → rendered example."""

__version__ = "0.1.0"
