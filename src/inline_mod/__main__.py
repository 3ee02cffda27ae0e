# src/inline_mod/__main__.py

from .cli import main_entry


if __name__ == "__main__":
    main_entry()
