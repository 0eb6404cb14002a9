"""TimeDistributionSlider demo application entry point."""

import logging
import sys

# SIGABRT 등 크래시 시 Python 트레이스백 출력 (원인 분석용)
try:
    import faulthandler
    faulthandler.enable(all_threads=True)
except Exception:
    pass

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QColor, QPalette

from src.utils.config import APP_NAME, ORG_NAME
from src.utils.i18n import init_language
from src.services.settings_manager import SettingsManager
from src.ui.main_window import MainWindow


def _apply_dark_theme(app: QApplication) -> None:
    """Apply a dark color palette using the Fusion style."""
    app.setStyle("Fusion")
    palette = QPalette()

    # Base colors
    palette.setColor(QPalette.ColorRole.Window, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Base, QColor(30, 30, 30))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor(50, 50, 50))
    palette.setColor(QPalette.ColorRole.ToolTipText, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Text, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Button, QColor(55, 55, 55))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(212, 212, 212))

    # Highlight
    palette.setColor(QPalette.ColorRole.Highlight, QColor(60, 140, 220))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(255, 255, 255))

    app.setPalette(palette)


def main() -> None:
    verbose = "--verbose" in sys.argv
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)
    _apply_dark_theme(app)

    # QSettings는 앱/조직 이름 설정 후 생성해야 함
    settings = SettingsManager()
    # --lang=ru 로 UI 언어 변경 (설정에 저장)
    for arg in sys.argv[1:]:
        if arg.startswith("--lang="):
            settings.set_ui_language(arg.split("=", 1)[1])
    init_language(settings.get_ui_language())

    window = MainWindow(settings)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
