import sys

from clipshot.main import main

sys.exit(main())
