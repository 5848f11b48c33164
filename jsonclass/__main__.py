import sys

from jsonclass.cli import main

sys.exit(main())
