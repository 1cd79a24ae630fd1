import sys

from site_distiller.cli import main

sys.exit(main())
