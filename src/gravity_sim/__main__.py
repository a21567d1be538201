# MIT License (see LICENSE)
from .app import main

main()
