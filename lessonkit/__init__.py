"""Library for loading, compiling, running and tracking small Rust exercises."""

__version__ = "5.4.1"