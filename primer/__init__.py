"""Small command-line programs and libraries for text, numbers, images, fetching, value display, deep equality and compression."""

__version__ = "0.1.0"