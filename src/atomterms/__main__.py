import sys

from atomterms.cli import main

sys.exit(main())
