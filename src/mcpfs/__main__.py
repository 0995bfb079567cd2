"""Allow ``python -m mcpfs``."""

from mcpfs.cli import main

main()
