import sys

from sysgpio.cli import main

sys.exit(main())
