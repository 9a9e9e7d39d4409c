# ruff: noqa: N802
import sys
from collections.abc import Callable

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QApplication, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QVBoxLayout, QWidget

from quotes.config import Config
from quotes.controller import QuoteController
from quotes.log import logger
from quotes.state import FetchOutcome, QuoteFound, QuotesState, Search, title, view

from .worker import QuoteSearchWorker


class QuotesWindow(QWidget):
    def __init__(self, config: Config, spawn_search: Callable[[], None] | None = None) -> None:
        super().__init__()
        self._config = config
        self.controller = QuoteController(spawn_search or self._start_search)

        # 名言正文
        self.heading = QLabel()
        self.heading.setWordWrap(True)
        self.heading.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)

        # 作者
        self.author = QLabel()
        self.author.setStyleSheet("color: rgb(128, 128, 128); font-size: 20px;")

        self.action_btn = QPushButton()
        self.action_btn.setStyleSheet("padding: 10px;")
        self.action_btn.clicked.connect(self.search_again)

        quote_row = QHBoxLayout()
        quote_row.setSpacing(20)
        quote_row.addWidget(self.heading)
        quote_row.addWidget(self.author, alignment=Qt.AlignmentFlag.AlignVCenter)

        content = QVBoxLayout()
        content.setSpacing(20)
        content.addLayout(quote_row)
        content.addWidget(self.action_btn, alignment=Qt.AlignmentFlag.AlignRight)

        container = QWidget()
        container.setMaximumWidth(500)
        container.setLayout(content)

        main = QVBoxLayout()
        main.addStretch()
        main.addWidget(container, alignment=Qt.AlignmentFlag.AlignHCenter)
        main.addStretch()
        self.setLayout(main)

        self.controller.subscribe(self.render)
        self.render(self.controller.state)

    def render(self, state: QuotesState) -> None:
        screen = view(state)
        self.setWindowTitle(title(state))

        self.heading.setText(screen.heading)
        self.heading.setStyleSheet(f"font-size: {40 if screen.author is None else 30}px;")

        self.author.setVisible(screen.author is not None)
        self.author.setText(screen.author or "")

        self.action_btn.setVisible(screen.action is not None)
        self.action_btn.setText(screen.action or "")

    def search_again(self) -> None:
        self.controller.dispatch(Search())

    def _start_search(self) -> None:
        worker = QuoteSearchWorker(self._config, self)
        worker.found.connect(self._on_quote_found)
        worker.finished.connect(worker.deleteLater)
        worker.start()

    @pyqtSlot(object)
    def _on_quote_found(self, outcome: FetchOutcome) -> None:
        self.controller.dispatch(QuoteFound(outcome))

    def closeEvent(self, a0: QCloseEvent | None) -> None:
        for worker in self.findChildren(QuoteSearchWorker):
            if worker.isRunning():
                logger.debug("Waiting for pending quote search to finish...")
                worker.wait()
        super().closeEvent(a0)


def gui_main(config: Config) -> None:
    app = QApplication(sys.argv)
    w = QuotesWindow(config)
    w.resize(700, 400)
    w.show()
    w.controller.start()
    sys.exit(app.exec())
