"""
Entry Point Script (Bootstrap)
==============================
Starts the viewer straight from a source checkout.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on 'sys.path' so 'import hyperview' resolves without an
   editable install.

Usage:
    $ python run.py --log-level debug
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from hyperview.app.main import main

if __name__ == "__main__":
    sys.exit(main())
