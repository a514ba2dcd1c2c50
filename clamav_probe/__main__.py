import sys

from clamav_probe.cli import main

sys.exit(main())
