import sys

from colorsupport.cli import main

sys.exit(main())
