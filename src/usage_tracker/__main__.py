"""Enable running usage-tracker as a module: python -m usage_tracker."""

from usage_tracker.cli import main

if __name__ == "__main__":
    main()
