import pytest

from quotes.exception import APIFailure
from quotes.schemas import Quote
from quotes.state import Command, Errored, Loaded, Loading, QuoteFound, Search, title, update, view

QUOTE = Quote(content="Be yourself", author="Oscar Wilde")
ALL_STATES = [Loading(), Loaded(QUOTE), Errored()]


@pytest.mark.parametrize("state", ALL_STATES)
def test_quote_found_loads_quote_verbatim(state) -> None:
    quote = Quote(content="  Stay hungry.\n", author="steve jobs ")
    new_state, command = update(state, QuoteFound(quote))
    assert new_state == Loaded(quote)
    assert new_state.quote is quote
    assert command is Command.NONE


@pytest.mark.parametrize("state", ALL_STATES)
def test_failure_errors_from_any_state(state) -> None:
    new_state, command = update(state, QuoteFound(APIFailure("connection refused")))
    assert new_state == Errored()
    assert command is Command.NONE


def test_search_while_loading_is_noop() -> None:
    state = Loading()
    new_state, command = update(state, Search())
    assert new_state is state
    assert command is Command.NONE


@pytest.mark.parametrize("state", [Loaded(QUOTE), Errored()])
def test_search_restarts_loading(state) -> None:
    new_state, command = update(state, Search())
    assert new_state == Loading()
    assert command is Command.SEARCH


def test_every_transition_stays_in_three_states() -> None:
    messages = [Search(), QuoteFound(QUOTE), Search(), Search(), QuoteFound(APIFailure("x")), Search()]
    state = Loading()
    for message in messages:
        state, _ = update(state, message)
        assert isinstance(state, (Loading, Loaded, Errored))


def test_titles() -> None:
    assert title(Loading()) == "Loading - Pokédex"
    assert title(Loaded(QUOTE)) == "Oscar Wilde - Pokédex"
    assert title(Errored()) == "Whoops! - Pokédex"


def test_loading_screen_has_no_action() -> None:
    screen = view(Loading())
    assert screen.heading == "Searching for Quotes..."
    assert screen.author is None
    assert screen.action is None


def test_loaded_screen_shows_quote() -> None:
    screen = view(Loaded(QUOTE))
    assert screen.heading == "Be yourself"
    assert screen.author == "-Oscar Wilde"
    assert screen.action == "Keep searching!"


def test_errored_screen_offers_retry() -> None:
    screen = view(Errored())
    assert screen.heading == "Whoops! Something went wrong..."
    assert screen.action == "Try again"
