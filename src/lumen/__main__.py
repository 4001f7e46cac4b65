import sys

from lumen.main import main

sys.exit(main())
