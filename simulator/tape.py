from simulator.errors import InvalidTape, OutOfBoundsHead


class Tape:
    """Fixed-size tape with a read/write head. The buffer never grows."""

    def __init__(self, symbols, head=1):
        self.cells = list(symbols)
        for symbol in self.cells:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidTape(symbol)
        self.head = head

    def __len__(self):
        return len(self.cells)

    def _check_head(self):
        if not 0 <= self.head < len(self.cells):
            raise OutOfBoundsHead(self.head, len(self.cells))

    def read(self):
        self._check_head()
        return self.cells[self.head]

    def write(self, symbol):
        self._check_head()
        self.cells[self.head] = symbol

    def move(self, direction):
        self.head += int(direction)
        self._check_head()

    def contents(self):
        return "".join(self.cells)

    def render(self):
        """Tape line plus a caret line marking the head."""
        head_str = [" "] * len(self.cells)
        if 0 <= self.head < len(self.cells):
            head_str[self.head] = "^"
        return self.contents(), "".join(head_str)

    def __str__(self):
        return self.contents()
