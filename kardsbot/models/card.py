from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, TypeAdapter


class Card(BaseModel):
    """
    A card as published in the deck builder's catalog.

    Attributes:
        id: Stable numeric identifier used in deck-builder URLs
        title: Card name, unique within the catalog
        faction: Nation the card belongs to
        kredits: Deployment cost
        rarity: Rarity label (e.g., "Standard", "Elite")
        type: Card type (e.g., "infantry", "order")
        text: Rules text
        image: Image file name
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: str
    faction: str | None = None
    kredits: int | None = None
    rarity: str | None = None
    type: str | None = None
    text: str | None = None
    image: str | None = None


_CARD_LIST = TypeAdapter(list[Card])


class Catalog:
    """
    Immutable snapshot of the card catalog.

    Cards are looked up by exact title. If a title appears twice,
    the first card wins.
    """

    __slots__ = ("_cards", "_ids_by_title")

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: tuple[Card, ...] = tuple(cards)
        self._ids_by_title: dict[str, int] = {}
        for card in self._cards:
            self._ids_by_title.setdefault(card.title, card.id)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "Catalog":
        """
        Build a catalog from a JSON array of cards.

        Raises:
            pydantic.ValidationError: If the body is not valid JSON or not
                an array of card objects
        """
        return cls(_CARD_LIST.validate_json(raw))

    def find_id(self, title: str) -> int | None:
        """Return the identifier of the card with exactly this title."""
        return self._ids_by_title.get(title)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
