"""Allow ``python -m tunefetch.cli`` execution."""

from tunefetch.cli.browse import main

main()
