"""
Run with: python -m hyperview
"""
import sys

from hyperview.app.main import main

if __name__ == "__main__":
    sys.exit(main())
