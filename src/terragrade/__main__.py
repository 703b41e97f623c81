import sys

from terragrade.cli.main import main

sys.exit(main())
