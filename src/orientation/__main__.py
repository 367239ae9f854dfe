import sys

from orientation.main import main

sys.exit(main())
