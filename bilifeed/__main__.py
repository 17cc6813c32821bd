import sys

from bilifeed.cli import main

sys.exit(main())
