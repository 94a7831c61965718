#!/usr/bin/env python3
"""PomoBuddy: entry point.

Run with:
    python main.py
    python -m pomobuddy
"""

from pomobuddy.__main__ import main


if __name__ == "__main__":
    main()
