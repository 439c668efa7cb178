"""Main entry point for CommentPulse."""

from .cli import main

if __name__ == "__main__":
    main()
