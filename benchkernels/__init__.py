"""Small, self-checking compute kernels for benchmarking, and a timer."""

__version__ = "0.1.0"

__all__ = [
    "cubic",
    "edn",
    "md5",
    "minver",
    "montgomery",
    "nbody",
    "sha256",
    "timing",
]