#!/usr/bin/env python3
"""
Editing session example for CompositeTreeLib.

This example demonstrates:
- Seeding a session with the demo project tree
- Adding files and folders under chosen destinations
- Keeping the previous snapshot intact across edits
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositetreelib import (
    LoggingConfig,
    RenderConfig,
    SessionConfig,
    TreeSession,
    configure_logging,
    folder_sizes,
)


def main():
    """Walk through a few copy-on-write edits."""
    configure_logging(LoggingConfig(level="INFO", fmt="  [%(levelname)s] %(message)s"))

    session = TreeSession(SessionConfig(render=RenderConfig.with_icons()))
    print(session.render())
    print("-" * 50)

    print("Destinations:")
    for path in session.destinations():
        print(f"  {path}")

    session.add_folder("docs")
    session.add_file("guide.md", "12", "projet/docs")
    session.add_file("Tooltip.tsx", "oops", "projet/src/components")  # falls back to 10 KB
    session.add_file("ghost.txt", "1", "projet/missing")              # ignored
    session.remove("projet/assets/logo.png")

    print("-" * 50)
    print(session.render())

    print(f"\nTotal: {session.total_size} KB "
          f"(previous snapshot still {session.previous_root.get_size()} KB)")

    print("\nFolder sizes:")
    for path, size in folder_sizes(session.root).items():
        print(f"  {size:>5} KB  {path}")


if __name__ == "__main__":
    main()
