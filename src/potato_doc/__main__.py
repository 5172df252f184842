"""Entry point for python -m potato_doc."""

from potato_doc.main import main

if __name__ == "__main__":
    main()
