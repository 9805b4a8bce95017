"""Command-line entry point for histogrammer."""
