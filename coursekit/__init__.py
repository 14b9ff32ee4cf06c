"""Teaching data structures and algorithms: containers, recursion, stylometry, threading demos and timing."""

__version__ = "0.1.0"