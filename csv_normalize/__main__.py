import sys

from csv_normalize.cli import main

sys.exit(main())
