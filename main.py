import sys

from careerhub.cli import main

if __name__ == "__main__":
	sys.exit(main())
