"""Allow `python -m sf_browser` to launch the GUI entrypoint."""
from __future__ import annotations

from .entrypoints.gui import main


if __name__ == "__main__":
    main()
