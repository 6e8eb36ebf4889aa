import sys

from wastebin.cli import main

sys.exit(main())
