# Card identifier -> requested quantity, in the order the entries were read
DeckRequest = dict[int, int]
