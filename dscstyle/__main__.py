import sys

from dscstyle.cli import main

sys.exit(main())
