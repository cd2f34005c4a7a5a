"""Allow running the package with ``python -m solidkit``."""
from solidkit.cli.main import main

if __name__ == "__main__":
    main()
