import sys

from physlist.cli import main

sys.exit(main())
