"""Allow ``python -m epochtime`` to run the command line tool."""

# Local Imports
from . import main

if __name__ == "__main__":
    main()
