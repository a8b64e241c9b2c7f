"""TAI timing, head index arithmetic, and flow and grain header layouts for media flows."""

__version__ = "0.6.0"

__all__ = [
    "dataformat",
    "flowinfo",
    "grain",
    "info",
    "mediatime",
    "rational",
    "status",
    "timing",
]