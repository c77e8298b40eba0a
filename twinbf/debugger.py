from .console import LIGHT_CYAN, bold_text, colored_text, styled
from .tape import HEAD0, HEAD1

from collections import deque
from ordered_set import OrderedSet
import copy
import sys


PROMPT = '(twinbf) '
HELP = 'c continue, s step, n step over loop, r run to end, S step back, b toggle breakpoint, q quit'
LINE_WIDTH = 64


class Debugger:
    def __init__(self, interpreter, input_func=None, output=None, color=True, history=1000):
        self.interpreter = interpreter
        self.input_func = input_func or input
        self.output = output if output is not None else sys.stdout
        self.color = color
        self.states = deque(maxlen=history)
        self.breakpoints = OrderedSet(interpreter.program.breakpoints)
        self.modified_indices = OrderedSet()

    def write(self, *args):
        print(*args, file=self.output)

    def print_program(self, state):
        program = self.interpreter.program
        matching = program.jump_table.get(state.pc)

        chars = []
        for index, c in enumerate(program.instructions):
            if index == state.pc:
                c = styled('current', c, self.color)
                if index in self.breakpoints and self.color:
                    c = bold_text(c)
            elif index in self.breakpoints:
                c = styled('breakpoint', c, self.color)
            elif index == matching and self.color:
                c = colored_text(LIGHT_CYAN, bold_text(c))
            chars.append(c)

        prefix = '{}: '.format(state.count)
        lines = [''.join(chars[i:i + LINE_WIDTH]) for i in range(0, len(chars), LINE_WIDTH)] or ['']
        self.write(prefix + ('\n' + ' ' * len(prefix)).join(lines))

        if state.pc < len(program):
            self.write('{}pc={} op={}'.format(' ' * len(prefix), state.pc, program[state.pc]))
        else:
            self.write('{}pc={} halted'.format(' ' * len(prefix), state.pc))

    def print_tape(self, state):
        tape = state.tape
        cells = []
        for address, value in tape.snapshot().items():
            on_head0 = address == tape.head(HEAD0)
            on_head1 = address == tape.head(HEAD1)
            if on_head0 and on_head1:
                cells.append(styled('both_heads', value, self.color))
            elif on_head0:
                cells.append(styled('head0', value, self.color))
            elif on_head1:
                cells.append(styled('head1', value, self.color))
            elif address in self.modified_indices:
                cells.append(styled('modified', value, self.color))
            else:
                cells.append(str(value))

        self.write('head0={} head1={} [{}..{}]'.format(tape.head0, tape.head1, tape.low, tape.high))
        self.write(' '.join(cells))

    def print_state(self, state):
        self.print_program(state)
        self.print_tape(state)
        self.write()

    def run(self, start_break=True):
        interpreter = self.interpreter
        program = interpreter.program

        step_into = start_break
        step_over_end = None
        skip_breakpoints = False
        prompt_once = False
        previous_input_line = 'c'

        while not interpreter.finished:
            state = interpreter.state

            if step_over_end is not None and state.pc == step_over_end:
                step_over_end = None

            at_breakpoint = not skip_breakpoints and state.pc in self.breakpoints
            if (step_into and step_over_end is None) or at_breakpoint or prompt_once:
                self.print_state(state)
                prompt_once = False

                try:
                    line = self.input_func(PROMPT).strip()
                except EOFError:
                    line = 'q'
                if len(line) == 0:
                    line = previous_input_line
                previous_input_line = line

                command = line[0]
                if command in 'csnr':
                    self.modified_indices.clear()
                    step_into = False
                    step_over_end = None
                    if command == 's':
                        step_into = True
                    elif command == 'n':
                        step_into = True
                        if program[state.pc] == '[':
                            step_over_end = program.jump_table[state.pc] + 1
                    elif command == 'r':
                        skip_breakpoints = True

                elif command == 'S':
                    if len(self.states) == 0:
                        self.write('Reached beginning of state history')
                    else:
                        interpreter.state = self.states.pop()
                        del interpreter.trace[interpreter.state.count:]
                        self.modified_indices.clear()
                    prompt_once = True
                    continue

                elif command == 'b':
                    if state.pc in self.breakpoints:
                        self.breakpoints.remove(state.pc)
                    else:
                        self.breakpoints.add(state.pc)
                    prompt_once = True
                    continue

                elif command == 'q':
                    sys.exit(0)

                else:
                    self.write('Unrecognized command "{}" ({})'.format(command, HELP))
                    prompt_once = True
                    continue

            self.states.append(copy.deepcopy(state))
            step = interpreter.step()
            if step.instruction in '+-.,':
                self.modified_indices.add(step.address)

        self.print_state(interpreter.state)
        return interpreter.state
