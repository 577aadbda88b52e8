"""Allow running Zen Focus as a module: python -m zenfocus."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import ZenFocusApp

logger = logging.getLogger("zenfocus")


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("ZENFOCUS_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Zen Focus")
    app.setOrganizationName("Zen Focus")

    window = ZenFocusApp()
    window.show()
    logger.info("Zen Focus ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
