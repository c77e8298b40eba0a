class TwinbfError(Exception):
    pass


class UnbalancedBrackets(TwinbfError):
    def __init__(self, index, position=None, symbol='['):
        self.index = index
        self.position = index if position is None else position
        self.symbol = symbol
        super().__init__('Unmatched "{}" at instruction {} (source offset {})'.format(
            symbol, index, self.position))


class InvalidInstruction(TwinbfError):
    def __init__(self, index, symbol):
        self.index = index
        self.symbol = symbol
        super().__init__('Invalid instruction {!r} at source offset {}'.format(symbol, index))


class TapeOutOfBounds(TwinbfError):
    def __init__(self, head, index):
        self.head = head
        self.index = index
        super().__init__('Head {} moved out of tape bounds to address {}'.format(head, index))


class ProgramLoadError(TwinbfError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__('Failed to read program {}: {}'.format(path, reason))


class StepLimitExceeded(TwinbfError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__('Step limit of {} exceeded'.format(limit))
