from collections import namedtuple
import os


ENV_PREFIX = 'TWINBF_'

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off', '')


def _parse_bool(value):
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError('Expected a boolean, got {!r}'.format(value))


def _parse_optional_int(value):
    value = value.strip().lower()
    if value in ('', 'none'):
        return None
    return int(value)


class Config(namedtuple('Config', ['cell_bits', 'tape_size', 'fixed_tape', 'origin', 'strict', 'max_steps'])):
    """Interpreter settings.

    cell_bits:  cell width, values wrap modulo 2**cell_bits; 0 is unbounded
    tape_size:  initial cells of a growable tape, or all cells of a fixed one
    fixed_tape: raise TapeOutOfBounds instead of growing
    origin:     buffer index of address 0
    strict:     reject non-instruction characters instead of skipping them
    max_steps:  abort with StepLimitExceeded after this many steps
    """

    parsers = {
        'cell_bits': int,
        'tape_size': int,
        'fixed_tape': _parse_bool,
        'origin': int,
        'strict': _parse_bool,
        'max_steps': _parse_optional_int,
    }

    @classmethod
    def from_env(cls, environ=None, **overrides):
        if environ is None:
            environ = os.environ

        values = DEFAULT_CONFIG._asdict()
        for field, parse in cls.parsers.items():
            name = ENV_PREFIX + field.upper()
            if name in environ:
                try:
                    values[field] = parse(environ[name])
                except ValueError as e:
                    raise ValueError('Bad value for {}: {}'.format(name, e)) from e

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values).validate()

    def validate(self):
        if self.cell_bits < 0:
            raise ValueError('cell_bits must not be negative')
        if self.tape_size < 1:
            raise ValueError('tape_size must be positive')
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError('max_steps must not be negative')
        if self.fixed_tape and not 0 <= self.origin < self.tape_size:
            raise ValueError('origin {} does not fit a fixed tape of {} cells'.format(self.origin, self.tape_size))
        return self


DEFAULT_CONFIG = Config(cell_bits=8, tape_size=64, fixed_tape=False, origin=0, strict=False, max_steps=None)
