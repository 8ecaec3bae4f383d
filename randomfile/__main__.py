import sys

from randomfile.cli import main

sys.exit(main())
