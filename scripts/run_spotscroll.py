"""Print a scrolling spotifyd status line for i3blocks, polybar and friends."""

from __future__ import annotations

import sys

from spotscroll.app import main

if __name__ == "__main__":
    sys.exit(main())
