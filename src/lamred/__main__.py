import sys

from lamred.cli import main

sys.exit(main())
