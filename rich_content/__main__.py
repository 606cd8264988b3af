"""Package entry point for ``python -m rich_content``.

HOW: Delegates to the CLI's main() function.
"""

from rich_content.cli import main

if __name__ == "__main__":
    main()
