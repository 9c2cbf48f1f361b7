import sys

from hostsweep.ui.main import main

if __name__ == "__main__":
    sys.exit(main())
