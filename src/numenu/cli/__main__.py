"""Allow `python -m numenu.cli`."""

from numenu.cli import cli_main

cli_main()
