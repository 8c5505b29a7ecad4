import sys

from airgeo.cli import main

sys.exit(main())
