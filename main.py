"""
Neuronal Migration - Main Entry Point

Opens the desktop window that animates radial, tangential and multipolar
neuronal migration across the developing cortex.
"""
import sys

from PySide6 import QtWidgets

from app.desktop.main_window import MainWindow


def main(argv=None):
    app = QtWidgets.QApplication(sys.argv if argv is None else argv)
    window = MainWindow()
    window.show()

    print("Neuronal Migration started.")
    print("Controls: Space/Enter to start or repeat the migration.")
    print("Key 'r': Reset.")
    print("Key 'q' or Esc: Quit.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
