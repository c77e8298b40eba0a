from .errors import InvalidInstruction, ProgramLoadError, UnbalancedBrackets

from ordered_set import OrderedSet
import logging


logger = logging.getLogger(__name__)

INSTRUCTIONS = '<>{}-+.,[]'
BREAKPOINT_MARKER = '!'


def match_brackets(instructions, positions=None):
    """Build the bidirectional jump table for every '[' and ']'.

    `positions` maps instruction indices back to source offsets and is only
    used to make errors point at the right place in the file.
    """
    jump_table = {}
    stack = []

    for index, symbol in enumerate(instructions):
        if symbol == '[':
            stack.append(index)
        elif symbol == ']':
            if not stack:
                raise UnbalancedBrackets(index, positions[index] if positions else None, ']')
            start = stack.pop()
            jump_table[start] = index
            jump_table[index] = start

    if stack:
        index = stack[-1]
        raise UnbalancedBrackets(index, positions[index] if positions else None, '[')

    return jump_table


class Program:
    def __init__(self, instructions, positions=None, breakpoints=()):
        self.instructions = instructions
        self.positions = tuple(positions) if positions is not None else tuple(range(len(instructions)))
        self.breakpoints = OrderedSet(breakpoints)
        self.jump_table = match_brackets(instructions, self.positions)

    @classmethod
    def parse(cls, source, strict=False):
        instructions = []
        positions = []
        breakpoints = []

        for offset, c in enumerate(source):
            if c in INSTRUCTIONS:
                instructions.append(c)
                positions.append(offset)
            elif c == BREAKPOINT_MARKER:
                # marks whichever instruction comes next
                breakpoints.append(len(instructions))
            elif strict and not c.isspace():
                raise InvalidInstruction(offset, c)

        program = cls(''.join(instructions), positions, breakpoints)
        logger.info('Parsed %d instructions, %d loops', len(program), len(program.jump_table) // 2)
        return program

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def __str__(self):
        return self.instructions

    def __repr__(self):
        return 'Program({!r})'.format(self.instructions)


def load(path, strict=False):
    logger.debug('Reading program from %s', path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ProgramLoadError(path, e) from e

    return Program.parse(source, strict=strict)
