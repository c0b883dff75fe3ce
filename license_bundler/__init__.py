"""License bundler - collect dependency license texts into one document."""

__version__ = "0.1.0"
