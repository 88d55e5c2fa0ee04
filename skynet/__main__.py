import sys

from skynet.cli import main

sys.exit(main())
