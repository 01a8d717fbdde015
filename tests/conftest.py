import pytest

from kardsbot.models.card import Card, Catalog

CATALOG_URL = "https://kardsdeck.test/assets/data/cards.json"
VIEW_URL = "https://kardsdeck.test/view?data="


@pytest.fixture
def sample_cards() -> list[dict]:
    """Sample cards.json entries."""
    return [
        {
            "id": 1,
            "title": "Bertrand Du Guesclin",
            "faction": "France",
            "kredits": 2,
            "rarity": "Elite",
            "type": "infantry",
            "text": "Blitz.",
            "image": "bertrand.png",
        },
        {
            "id": 2,
            "title": "Mosin-Nagant",
            "faction": "Soviet",
            "kredits": 1,
            "rarity": "Standard",
            "type": "order",
            "text": "Deal 1 damage.",
            "image": "mosin.png",
        },
        {
            "id": 37,
            "title": "Panzer IV",
            "faction": "Germany",
            "kredits": 4,
            "rarity": "Limited",
            "type": "tank",
            "text": "",
            "image": "panzer_iv.png",
        },
    ]


@pytest.fixture
def catalog(sample_cards: list[dict]) -> Catalog:
    return Catalog(Card(**card) for card in sample_cards)


@pytest.fixture
def sample_deck_text() -> str:
    """Deck text as pasted from the game."""
    return "2x (1K) Mosin-Nagant\n1x (2K) Bertrand Du Guesclin"


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
