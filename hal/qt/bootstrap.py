"""Qt frontend bootstrap and runtime wiring."""

from __future__ import annotations

from hal.app.composition import compose
from hal.infra.config import HalConfig
from hal.qt.widgets import StackPresenter, SurfacePage

try:
    from PyQt6.QtWidgets import QApplication, QMainWindow
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt surface. Install dependency 'PyQt6'.") from exc


def run_qt(config: HalConfig) -> int:
    """Open the HAL window and run the Qt event loop."""
    app = QApplication.instance() or QApplication([])
    app.setStyleSheet(
        """
        QWidget { font-size: 16px; background: #0b0b0b; color: #e2e8f0; }
        QPushButton { padding: 10px 16px; }
        """
    )
    presenter = StackPresenter()
    application = compose(config, surface_factory=SurfacePage)
    application.start(presenter)
    window = QMainWindow()
    window.setWindowTitle("HAL 9000")
    window.setCentralWidget(presenter)
    window.resize(640, 360)
    window.show()
    return int(app.exec())
