import sys

from spinwheel.main import main

sys.exit(main())
