import sys

from chipvm.frontend import main

if __name__ == "__main__":
    sys.exit(main())
