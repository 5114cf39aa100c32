"""IPv4 subnet calculator: argument parsing, subnet computation and a command line entry point."""

__version__ = "1.0.0"
__all__ = ["parse", "calc", "cli"]