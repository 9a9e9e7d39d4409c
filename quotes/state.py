from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from .exception import APIFailure
from .schemas import Quote

type FetchOutcome = Quote | APIFailure

TITLE_SUFFIX = "Pokédex"


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Loaded:
    quote: Quote


@dataclass(frozen=True, slots=True)
class Errored:
    pass


type QuotesState = Loading | Loaded | Errored


@dataclass(frozen=True, slots=True)
class QuoteFound:
    result: FetchOutcome


@dataclass(frozen=True, slots=True)
class Search:
    pass


type Message = QuoteFound | Search


class Command(Enum):
    NONE = "none"
    SEARCH = "search"


def update(state: QuotesState, message: Message) -> tuple[QuotesState, Command]:
    """Compute the state that follows `message` and the side effect to run.

    Only one search may be in flight, so `Search` is ignored while loading.
    """
    match message:
        case QuoteFound(result=Quote() as quote):
            return Loaded(quote), Command.NONE
        case QuoteFound():
            return Errored(), Command.NONE
        case Search():
            if isinstance(state, Loading):
                return state, Command.NONE
            return Loading(), Command.SEARCH
        case _:
            assert_never(message)


def title(state: QuotesState) -> str:
    match state:
        case Loading():
            subtitle = "Loading"
        case Loaded(quote=quote):
            subtitle = quote.author
        case Errored():
            subtitle = "Whoops!"
        case _:
            assert_never(state)

    return f"{subtitle} - {TITLE_SUFFIX}"


@dataclass(frozen=True, slots=True)
class Screen:
    heading: str
    author: str | None = None
    action: str | None = None


def view(state: QuotesState) -> Screen:
    match state:
        case Loading():
            return Screen("Searching for Quotes...")
        case Loaded(quote=quote):
            return Screen(quote.content, author=f"-{quote.author}", action="Keep searching!")
        case Errored():
            return Screen("Whoops! Something went wrong...", action="Try again")
        case _:
            assert_never(state)
