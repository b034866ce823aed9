import sys

from egg.cli import main

sys.exit(main())
