"""Allow running the visualizer with ``python -m sbom_visualizer``."""

from .cli.main import main

if __name__ == "__main__":
    main()
