"""Command line interface for colorpicker."""
