"""Command line interfaces for Apple Notes Exporter."""
