from .bf import Interpreter
from .config import Config
from .debugger import Debugger
from .errors import TwinbfError
from .program import load

import argparse
import logging
import os
import sys


logger = logging.getLogger('twinbf')

LOG_ENV = 'TWINBF_LOG'
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'
VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_logging(verbosity=0, environ=None):
    if environ is None:
        environ = os.environ

    level = VERBOSITY_LEVELS[min(verbosity, len(VERBOSITY_LEVELS) - 1)]
    if verbosity == 0 and environ.get(LOG_ENV):
        name = environ[LOG_ENV].strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
            logger.warning('Unknown log level %r in %s', name, LOG_ENV)

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)
    return level


def format_tape(tape):
    lines = []
    for address, value in tape.snapshot().items():
        marks = []
        if address == tape.head0:
            marks.append('head0')
        if address == tape.head1:
            marks.append('head1')
        suffix = '  <- {}'.format(', '.join(marks)) if marks else ''
        lines.append('{:>6}: {}{}'.format(address, value, suffix))
    return '\n'.join(lines)


def format_step(step):
    return '{:>6} pc={:<5} {} head0={} head1={} cell[{}]={}'.format(*step)


def build_parser():
    parser = argparse.ArgumentParser(prog='twinbf', description='Run a two-head tape program.')
    parser.add_argument('path', help='program file')
    parser.add_argument('--strict', action='store_const', const=True, default=None,
                        help='reject characters that are not instructions')
    parser.add_argument('--cell-bits', type=int, default=None,
                        help='cell width in bits, 0 for unbounded cells (default 8)')
    parser.add_argument('--tape-size', type=int, default=None,
                        help='initial tape length, or the whole tape with --fixed-tape (default 64)')
    parser.add_argument('--fixed-tape', action='store_const', const=True, default=None,
                        help='fail when a head leaves the tape instead of growing it')
    parser.add_argument('--origin', type=int, default=None,
                        help='buffer index of address 0, room for negative addresses')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='abort after this many steps')
    parser.add_argument('--trace', action='store_true', help='print every executed step')
    parser.add_argument('--debug', action='store_true', help='step through the program interactively')
    parser.add_argument('--no-color', action='store_true', help='plain debugger output')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='more log output, repeat for step tracing (or set {})'.format(LOG_ENV))
    return parser


def main(argv=None, stdout=None):
    args = build_parser().parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout
    configure_logging(args.verbose)

    try:
        config = Config.from_env(
            cell_bits=args.cell_bits,
            tape_size=args.tape_size,
            fixed_tape=args.fixed_tape,
            origin=args.origin,
            strict=args.strict,
            max_steps=args.max_steps)
    except ValueError as e:
        print('error: {}'.format(e), file=sys.stderr)
        return 1

    try:
        program = load(args.path, strict=config.strict)

        on_step = None
        if args.trace:
            def on_step(step):
                print(format_step(step), file=stdout)

        interpreter = Interpreter(program, config, on_step=on_step)
        if args.debug:
            state = Debugger(interpreter, output=stdout, color=not args.no_color).run()
        else:
            state = interpreter.run()

    except TwinbfError as e:
        logger.debug('Run aborted', exc_info=True)
        print('error: {}: {}'.format(type(e).__name__, e), file=sys.stderr)
        return 1

    if not args.debug:
        print('halted after {} steps'.format(state.count), file=stdout)
        print(format_tape(state.tape), file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
