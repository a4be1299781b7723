"""Allow ``python -m pertable``."""

from pertable.cli.main import main

main()
