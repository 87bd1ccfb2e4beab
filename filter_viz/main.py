"""
Main entry point for the Filter Visualizer.
Launches the main frame with the animated filter display.
"""

import sys

from PyQt5.QtWidgets import QApplication


def main():
    # Initialize logger first
    from filter_viz.utils.logger import logger

    logger.info("Filter Visualizer starting", component="APP")

    app = QApplication(sys.argv)

    from filter_viz.gui.main_frame import MainFrame

    window = MainFrame()

    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
