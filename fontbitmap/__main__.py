import sys

from fontbitmap.cli import main

sys.exit(main())
