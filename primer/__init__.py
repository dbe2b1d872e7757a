"""Small command-line tools and library modules for text, numbers, images, HTTP and data."""

__version__ = "0.1.0"