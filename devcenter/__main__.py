"""
Entry point for the `devcenter` command-line interface.

devcenter registers the branch and commit of a CI run with the Dev Center.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the devcenter CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
