import sys

from notecache.cli import main

sys.exit(main())
