import sys

from tilt2048.cli import main

sys.exit(main())
