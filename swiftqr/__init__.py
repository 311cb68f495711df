"""Pure Python QR code generation with a terminal renderer and command line tool."""

__version__ = "0.1.0"