import sys

from factoradic.cli import main

sys.exit(main())
