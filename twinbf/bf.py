from .config import DEFAULT_CONFIG
from .errors import StepLimitExceeded
from .program import Program
from .tape import HEAD0, HEAD1, Tape

from collections import namedtuple
import logging


logger = logging.getLogger(__name__)


# One executed instruction. `address` and `value` describe the cell the
# instruction acted on: the cell under head1 for '{', '}' and '.', the cell
# under head0 for everything else.
TraceStep = namedtuple('TraceStep', ['count', 'pc', 'instruction', 'head0', 'head1', 'address', 'value'])


class State:
    def __init__(self, tape, pc=0, count=0):
        self.tape = tape
        self.pc = pc
        self.count = count

    @property
    def head0(self):
        return self.tape.head0

    @property
    def head1(self):
        return self.tape.head1

    def __repr__(self):
        return 'State(pc={}, count={}, tape={!r})'.format(self.pc, self.count, self.tape)


def make_tape(config):
    return Tape(size=config.tape_size, cell_bits=config.cell_bits,
                fixed=config.fixed_tape, origin=config.origin)


class Interpreter:
    def __init__(self, program, config=None, tape=None, record_trace=False, on_step=None):
        self.config = config or DEFAULT_CONFIG
        if not isinstance(program, Program):
            program = Program.parse(program, strict=self.config.strict)

        self.program = program
        self.state = State(tape if tape is not None else make_tape(self.config))
        self.record_trace = record_trace
        self.on_step = on_step
        self.trace = []

    @property
    def tape(self):
        return self.state.tape

    @property
    def finished(self):
        return self.state.pc >= len(self.program)

    def step(self):
        state = self.state
        if state.pc >= len(self.program):
            return None

        max_steps = self.config.max_steps
        if max_steps is not None and state.count >= max_steps:
            raise StepLimitExceeded(max_steps)

        tape = state.tape
        pc = state.pc
        op = self.program[pc]
        head = HEAD0

        if op == '<':
            tape.move_head0(-1)

        elif op == '>':
            tape.move_head0(1)

        elif op == '{':
            tape.move_head1(-1)
            head = HEAD1

        elif op == '}':
            tape.move_head1(1)
            head = HEAD1

        elif op == '-':
            tape.write(HEAD0, tape.read(HEAD0) - 1)

        elif op == '+':
            tape.write(HEAD0, tape.read(HEAD0) + 1)

        elif op == '.':
            tape.write(HEAD1, tape.read(HEAD0))
            head = HEAD1

        elif op == ',':
            tape.write(HEAD0, tape.read(HEAD1))

        elif op == '[':
            if tape.read(HEAD0) == 0:
                state.pc = self.program.jump_table[pc]

        elif op == ']':
            if tape.read(HEAD0) != 0:
                state.pc = self.program.jump_table[pc]

        state.pc += 1
        state.count += 1

        address = tape.head(head)
        step = TraceStep(state.count, pc, op, tape.head0, tape.head1, address, tape.cell(address))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('#%d pc=%d op=%s head0=%d head1=%d cell[%d]=%d', *step)
        if self.record_trace:
            self.trace.append(step)
        if self.on_step is not None:
            self.on_step(step)

        return step

    def run(self):
        logger.info('Running %d instructions', len(self.program))

        while self.state.pc < len(self.program):
            self.step()

        logger.info('Halted after %d steps, head0=%d head1=%d',
                    self.state.count, self.state.head0, self.state.head1)
        return self.state


def execute(source, config=None, **kwargs):
    config = config or DEFAULT_CONFIG
    program = source if isinstance(source, Program) else Program.parse(source, strict=config.strict)
    interpreter = Interpreter(program, config, **kwargs)
    interpreter.run()
    return interpreter
