"""
Entry point for Apple Notes Exporter.

Run with ``python -m notes_exporter.main`` or the ``apple-notes-exporter``
console script.
"""


def main():
    """Main entry point for Apple Notes Exporter."""
    from notes_exporter.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    import sys
    sys.exit(main())
