import sys

from badevann.cli import main

sys.exit(main())
