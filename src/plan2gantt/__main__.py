"""Allow ``python -m plan2gantt``."""

from plan2gantt.cli import main

main()
