"""Counting, rendering and configuration for letter histograms."""
