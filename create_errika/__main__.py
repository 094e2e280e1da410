import sys

from create_errika.cli import main

sys.exit(main())
