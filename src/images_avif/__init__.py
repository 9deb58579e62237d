"""Single-object S3 image to AVIF converter."""

__version__ = "0.1.0"
