"""tube2notion - turn YouTube tutorials into structured Notion how-to pages."""

__version__ = "0.1.0"
