import sys

from ficrypt.cli import main

sys.exit(main())
