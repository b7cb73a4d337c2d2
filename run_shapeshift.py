#!/usr/bin/env python3
"""
Shapeshift demo launcher.

Run this from the project root to open the masonry demo window.
"""

from shapeshift.run_gui import run_gui

if __name__ == '__main__':
    run_gui()
