import sys

from icanaddr.cli import main

sys.exit(main())
