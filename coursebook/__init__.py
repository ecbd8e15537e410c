"""Course book preprocessing, exercise extraction and exercise solutions."""

__version__ = "0.1.0"