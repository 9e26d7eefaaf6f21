"""Form relay backend: careers and contact submissions delivered by email."""

__version__ = "0.1.0"
