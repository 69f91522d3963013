"""Allow ``python -m coverart.cli`` execution."""

from coverart.cli.find_images import main

main()
