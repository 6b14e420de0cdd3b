import sys

from genv_ex.cli import main

sys.exit(main())
