#!/usr/bin/env python3
"""
tube2notion - YouTube tutorial to Notion how-to pages

Simple usage:
    python run.py convert guide.md                  # Show the blocks a guide produces
    python run.py publish https://youtu.be/VIDEO_ID # Transcript -> how-to -> Notion page
    python run.py serve                             # Run the webhook server
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from tube2notion.cli import app

if __name__ == "__main__":
    app()
