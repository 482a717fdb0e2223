"""regwalk CLI entry point.

This module enables running regwalk as:
    python -m regwalk <command>
"""

from regwalk.cli import main

if __name__ == "__main__":
    main()
