"""Allow running the CLI as: python -m kraken_public <command>."""

from kraken_public.cli import main

main()
