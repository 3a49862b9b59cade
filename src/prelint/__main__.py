import sys

from prelint.cli import main

sys.exit(main())
