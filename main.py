#!/usr/bin/env python3
"""Zen Focus — entry point.

Run with:
    python main.py
    python -m zenfocus
"""

from zenfocus.__main__ import main


if __name__ == "__main__":
    main()
