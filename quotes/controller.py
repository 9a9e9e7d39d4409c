from collections.abc import Callable

from .log import logger
from .state import Command, Loading, Message, QuotesState, update

type Listener = Callable[[QuotesState], None]


class QuoteController:
    """Owns the current state and applies messages to it.

    `spawn_search` must start a quote search without blocking and later
    deliver its outcome back through `dispatch(QuoteFound(...))`.
    """

    def __init__(self, spawn_search: Callable[[], None]) -> None:
        self._spawn_search = spawn_search
        self._state: QuotesState = Loading()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> QuotesState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def start(self) -> None:
        self._state = Loading()
        self._notify()
        self._spawn_search()

    def dispatch(self, message: Message) -> None:
        state, command = update(self._state, message)
        if state is self._state:
            logger.debug(f"Ignored {type(message).__name__} while {type(state).__name__}")
            return

        logger.debug(f"{type(self._state).__name__} -> {type(state).__name__}")
        self._state = state

        if command is Command.SEARCH:
            self._spawn_search()
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
