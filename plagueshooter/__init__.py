"""Terminal survival shooter: hold off the infected until the rescue arrives."""

__version__ = "0.1.0"