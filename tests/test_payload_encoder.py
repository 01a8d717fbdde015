import pytest

from kardsbot.services.payload_encoder import (
    build_deck_url,
    decode_deck_token,
    deck_to_text,
    encode_deck,
)


class TestDeckToText:
    def test_strips_json_structure(self) -> None:
        assert deck_to_text({2: 2, 1: 1}) == "2:2,1:1"

    def test_keeps_key_order(self) -> None:
        assert deck_to_text({37: 1, 2: 3}) == "37:1,2:3"

    def test_empty_deck(self) -> None:
        assert deck_to_text({}) == ""


class TestEncodeDeck:
    def test_known_token(self) -> None:
        assert encode_deck({2: 2, 1: 1}) == "MjoyLDE6MQ"

    def test_decodes_back_to_pairs(self) -> None:
        token = encode_deck({2: 2, 1: 1})

        assert decode_deck_token(token) == "2:2,1:1"

    def test_token_is_url_safe(self) -> None:
        deck = {card_id: card_id % 3 + 1 for card_id in range(1, 400, 7)}

        token = encode_deck(deck)

        assert not set(token) & {"+", "/", "="}
        assert decode_deck_token(token) == deck_to_text(deck)

    def test_deterministic(self) -> None:
        deck = {101: 2, 55: 1, 7: 3}

        assert encode_deck(deck) == encode_deck(dict(deck))

    def test_order_changes_token(self) -> None:
        assert encode_deck({1: 1, 2: 2}) != encode_deck({2: 2, 1: 1})


class TestDecodeDeckToken:
    def test_invalid_token_raises(self) -> None:
        with pytest.raises(ValueError):
            decode_deck_token("A")


class TestBuildDeckUrl:
    def test_appends_token(self) -> None:
        url = build_deck_url("https://kardsdeck.opengamela.com/view?data=", {2: 2, 1: 1})

        assert url == "https://kardsdeck.opengamela.com/view?data=MjoyLDE6MQ"
