import sys

from xyz2sgf.tools.batch_convert import main

if __name__ == "__main__":
    sys.exit(main())
