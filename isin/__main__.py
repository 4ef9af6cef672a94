import sys

from isin.tool import main

sys.exit(main())
