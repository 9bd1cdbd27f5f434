"""Read, validate and print .rt ray-tracing scene files."""

__version__ = "0.1.0"