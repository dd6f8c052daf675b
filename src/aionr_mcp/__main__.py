"""Allow ``python -m aionr_mcp``."""

from aionr_mcp.main import main

main()
