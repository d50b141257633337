import sys

from fslist.cli import main

sys.exit(main())
