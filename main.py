import sys
from localization_manager.cli import main

if __name__ == "__main__":
    sys.exit(main())
