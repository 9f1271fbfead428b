"""Recipe detection for captions, overlay text and comments of social posts."""

__version__ = "0.1.0"
