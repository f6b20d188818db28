import sys

from yrweather.cli import main

sys.exit(main())
