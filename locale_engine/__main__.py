import sys

from locale_engine.cli import main

sys.exit(main())
