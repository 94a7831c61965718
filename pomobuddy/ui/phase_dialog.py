"""Modal "Session Complete!" dialog shown when a phase runs out."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QWidget

from ..timer.engine import PhaseNotification


class PhaseDialog(QDialog):
    """Shows a :class:`PhaseNotification` and reports its dismissal.

    ``acknowledged`` fires once per shown notification, whether the
    user pressed Continue, hit Escape, or closed the window.
    """

    acknowledged = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("phaseDialog")
        self.setWindowTitle("Session Complete!")
        self.setModal(True)
        self.setMinimumWidth(320)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(16)

        title = QLabel("Session Complete!", self)
        title.setObjectName("dialogTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._message_label = QLabel(self)
        self._message_label.setObjectName("dialogMessage")
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message_label.setWordWrap(True)
        layout.addWidget(self._message_label)

        self._continue_btn = QPushButton("Continue", self)
        self._continue_btn.setDefault(True)
        self._continue_btn.clicked.connect(self.accept)
        layout.addWidget(self._continue_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._showing = False
        self.finished.connect(self._on_finished)

    @property
    def message(self) -> str:
        return self._message_label.text()

    def show_notification(self, notification: PhaseNotification) -> None:
        """Display *notification* without blocking the event loop."""
        self._message_label.setText(notification.message)
        self._showing = True
        self.open()

    def _on_finished(self, _result: int) -> None:
        if not self._showing:
            return
        self._showing = False
        self.acknowledged.emit()
