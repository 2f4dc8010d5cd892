import sys

from veckalib.cli import main

sys.exit(main())
