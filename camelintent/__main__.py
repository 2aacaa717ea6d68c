"""
Main entry point for the camelintent CLI.
"""

from camelintent.cli import cli


def main() -> None:
    """Main function for the camelintent CLI."""
    cli()


if __name__ == "__main__":
    main()
