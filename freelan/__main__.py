import sys

from freelan.cli import main

sys.exit(main())
