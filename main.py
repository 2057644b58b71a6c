import sys

from htmlcreator.cli import main


if __name__ == "__main__":
    sys.exit(main())
