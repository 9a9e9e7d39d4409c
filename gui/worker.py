import anyio
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from quotes.config import Config
from quotes.exception import APIFailure
from quotes.log import logger
from quotes.search import find_quote
from quotes.state import FetchOutcome


class QuoteSearchWorker(QThread):
    """在后台线程中执行一次名言查询，通过 `found` 信号把结果交回 UI 线程。"""

    found = pyqtSignal(object)

    def __init__(self, config: Config, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._config = config

    def run(self) -> None:
        outcome: FetchOutcome
        try:
            outcome = anyio.run(find_quote, self._config)
        except Exception as e:
            logger.opt(exception=e).error("Quote search crashed")
            outcome = APIFailure(f"Quote search crashed: {e!r}")
            outcome.__cause__ = e
        # every search must end in a transition, otherwise the window stays in Loading
        self.found.emit(outcome)
