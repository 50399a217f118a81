"""Entry point for inspecting jsdoc symbol dumps."""

from src.inspect_symbols import main

if __name__ == "__main__":
    raise SystemExit(main())
