import sys

from shoresquad.cli import main

sys.exit(main())
