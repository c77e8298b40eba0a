from .errors import TapeOutOfBounds


HEAD0 = 0
HEAD1 = 1


class Tape:
    """A tape of integer cells shared by two heads.

    Addresses are relative to an origin, so heads can go negative. A growable
    tape doubles its buffer on whichever side an access falls outside of; a
    fixed tape covers addresses [-origin, size - origin) and raises
    TapeOutOfBounds as soon as a head leaves that range.

    `cell_bits` is the cell width: values wrap modulo 2**cell_bits. A width of
    0 means unbounded integers.
    """

    def __init__(self, size=64, cell_bits=8, fixed=False, origin=0):
        if size < 1:
            raise ValueError('Tape size must be positive, got {}'.format(size))
        if fixed and not 0 <= origin < size:
            raise ValueError('Origin {} does not fit a tape of {} cells'.format(origin, size))

        self.cells = [0] * size
        self.offset = origin if fixed else max(origin, 0)
        self.fixed = fixed
        self.cell_bits = cell_bits
        self.modulus = 1 << cell_bits if cell_bits else None
        self.heads = [0, 0]
        self.low = 0
        self.high = 0

    @property
    def head0(self):
        return self.heads[HEAD0]

    @property
    def head1(self):
        return self.heads[HEAD1]

    def head(self, head):
        return self.heads[head]

    def bounds(self):
        """Addresses currently backed by the buffer, as a half-open range."""
        return -self.offset, len(self.cells) - self.offset

    def move_head(self, head, delta):
        address = self.heads[head] + delta
        if self.fixed:
            low, high = self.bounds()
            if not low <= address < high:
                raise TapeOutOfBounds(head, address)

        self.heads[head] = address
        self.low = min(self.low, address)
        self.high = max(self.high, address)
        return address

    def move_head0(self, delta):
        return self.move_head(HEAD0, delta)

    def move_head1(self, delta):
        return self.move_head(HEAD1, delta)

    def normalize(self, value):
        if self.modulus is None:
            return value
        return value % self.modulus

    def cell(self, address):
        index = address + self.offset
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return 0

    def set_cell(self, address, value):
        index = self._ensure(address)
        self.cells[index] = self.normalize(value)
        self.low = min(self.low, address)
        self.high = max(self.high, address)

    def read(self, head):
        return self.cell(self.heads[head])

    def write(self, head, value):
        self.set_cell(self.heads[head], value)

    def load(self, values, start=0):
        for i, value in enumerate(values):
            self.set_cell(start + i, value)

    def snapshot(self):
        return {address: self.cell(address) for address in range(self.low, self.high + 1)}

    def _ensure(self, address):
        index = address + self.offset
        if 0 <= index < len(self.cells):
            return index

        if self.fixed:
            # heads cannot get here, only direct writes such as load()
            raise TapeOutOfBounds(None, address)

        if index < 0:
            extra = max(len(self.cells), -index)
            self.cells[:0] = [0] * extra
            self.offset += extra
        else:
            extra = max(len(self.cells), index - len(self.cells) + 1)
            self.cells.extend([0] * extra)

        return address + self.offset

    def __repr__(self):
        return 'Tape(head0={}, head1={}, cells={})'.format(self.head0, self.head1, self.snapshot())
