import sys

from treescaffold.main import main

sys.exit(main())
