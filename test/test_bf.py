from twinbf.bf import Interpreter, TraceStep, execute, make_tape
from twinbf.config import DEFAULT_CONFIG
from twinbf.errors import InvalidInstruction, StepLimitExceeded, TapeOutOfBounds, UnbalancedBrackets

from unittest import TestCase
import logging


class InterpreterTest(TestCase):
    def run_code(self, code, config=None, cells=None, **kwargs):
        config = config or DEFAULT_CONFIG
        tape = make_tape(config)
        if cells:
            tape.load(cells)
        interpreter = Interpreter(code, config, tape=tape, **kwargs)
        interpreter.run()
        return interpreter

    def test_empty_program(self):
        interpreter = self.run_code('', cells=[4, 5])
        self.assertTrue(interpreter.finished)
        self.assertEqual(0, interpreter.state.count)
        self.assertEqual({0: 4, 1: 5}, interpreter.tape.snapshot())

    def test_head_moves(self):
        interpreter = self.run_code('>>><{{}')
        self.assertEqual(2, interpreter.tape.head0)
        self.assertEqual(-1, interpreter.tape.head1)

    def test_increment_decrement(self):
        interpreter = self.run_code('+++-')
        self.assertEqual(2, interpreter.tape.cell(0))

    def test_wrapping(self):
        interpreter = self.run_code('-')
        self.assertEqual(255, interpreter.tape.cell(0))
        interpreter = self.run_code('+', cells=[255])
        self.assertEqual(0, interpreter.tape.cell(0))

    def test_unbounded_cells(self):
        config = DEFAULT_CONFIG._replace(cell_bits=0)
        interpreter = self.run_code('--', config)
        self.assertEqual(-2, interpreter.tape.cell(0))

    def test_copy_onto_itself(self):
        interpreter = self.run_code('+++.')
        self.assertEqual(3, interpreter.tape.cell(0))

    def test_copy_to_head1(self):
        interpreter = self.run_code('+++}.')
        self.assertEqual(3, interpreter.tape.cell(0))
        self.assertEqual(3, interpreter.tape.cell(1))

    def test_copy_from_head1(self):
        # head0 = 1, head1 = 0: ',' writes tape[1] = tape[0]
        interpreter = self.run_code('+++>,')
        self.assertEqual(3, interpreter.tape.cell(0))
        self.assertEqual(3, interpreter.tape.cell(1))
        self.assertEqual(1, interpreter.tape.head0)
        self.assertEqual(0, interpreter.tape.head1)

    def test_copy_from_zero_cell(self):
        interpreter = self.run_code('+++}}},')
        self.assertEqual(0, interpreter.tape.cell(0))
        self.assertEqual(0, interpreter.tape.cell(3))

    def test_head_independence(self):
        interpreter = self.run_code('+}}}{++')
        self.assertEqual(3, interpreter.tape.cell(0))
        self.assertEqual(2, interpreter.tape.head1)
        self.assertEqual(0, interpreter.tape.cell(2))

    def test_clear_loop(self):
        for n in [1, 2, 7, 200]:
            trace = self.run_code('[-]', cells=[n], record_trace=True).trace
            self.assertEqual(0, trace[-1].value)
            self.assertEqual(n, sum(1 for step in trace if step.instruction == '-'))

    def test_loop_skipped_on_zero(self):
        interpreter = self.run_code('[+>+]>+', record_trace=True)
        self.assertEqual({0: 0, 1: 1}, interpreter.tape.snapshot())
        self.assertEqual(['[', '>', '+'], [step.instruction for step in interpreter.trace])

    def test_nested_loops_multiply(self):
        # tape[2] = 3 * 4
        interpreter = self.run_code('+++[>++++[>+<-]<-]')
        self.assertEqual({0: 0, 1: 0, 2: 12}, interpreter.tape.snapshot())

    def test_move_value_with_both_heads(self):
        # head1 parks on cell 2, each pass copies cell 1 there and takes 2 off cell 0
        interpreter = self.run_code('++++++}}>+<[->.<-]')
        self.assertEqual(0, interpreter.tape.cell(0))
        self.assertEqual(1, interpreter.tape.cell(1))
        self.assertEqual(1, interpreter.tape.cell(2))

    def test_determinism(self):
        code = '++[>+++[}.{-]<-]>>,'
        first = self.run_code(code, cells=[1, 2, 3], record_trace=True)
        second = self.run_code(code, cells=[1, 2, 3], record_trace=True)
        self.assertEqual(first.trace, second.trace)
        self.assertEqual(first.tape.snapshot(), second.tape.snapshot())

    def test_comments_ignored(self):
        interpreter = self.run_code('three plus: +++ done')
        self.assertEqual(3, interpreter.tape.cell(0))

    def test_strict_mode(self):
        config = DEFAULT_CONFIG._replace(strict=True)
        with self.assertRaises(InvalidInstruction):
            Interpreter('+a', config)

    def test_unbalanced_before_execution(self):
        tape = make_tape(DEFAULT_CONFIG)
        with self.assertRaises(UnbalancedBrackets):
            Interpreter('+++[', tape=tape)
        self.assertEqual({0: 0}, tape.snapshot())

    def test_fixed_tape_out_of_bounds(self):
        config = DEFAULT_CONFIG._replace(tape_size=3, fixed_tape=True)
        interpreter = Interpreter('+>>>+', config)
        with self.assertRaises(TapeOutOfBounds) as cm:
            interpreter.run()
        self.assertEqual(0, cm.exception.head)
        self.assertEqual(3, cm.exception.index)
        self.assertEqual(3, interpreter.state.pc)

    def test_fixed_tape_negative_addresses(self):
        config = DEFAULT_CONFIG._replace(tape_size=4, fixed_tape=True, origin=2)
        interpreter = self.run_code('<<+{.', config)
        self.assertEqual(1, interpreter.tape.cell(-2))
        self.assertEqual(1, interpreter.tape.cell(-1))

    def test_step_limit(self):
        config = DEFAULT_CONFIG._replace(max_steps=100)
        with self.assertRaises(StepLimitExceeded) as cm:
            self.run_code('+[]', config)
        self.assertEqual(100, cm.exception.limit)

    def test_step(self):
        interpreter = Interpreter('+}.', DEFAULT_CONFIG)
        self.assertEqual(TraceStep(1, 0, '+', 0, 0, 0, 1), interpreter.step())
        self.assertEqual(TraceStep(2, 1, '}', 0, 1, 1, 0), interpreter.step())
        self.assertEqual(TraceStep(3, 2, '.', 0, 1, 1, 1), interpreter.step())
        self.assertTrue(interpreter.finished)
        self.assertIsNone(interpreter.step())

    def test_on_step(self):
        steps = []
        self.run_code('++', on_step=steps.append)
        self.assertEqual([0, 1], [step.pc for step in steps])

    def test_steps_logged(self):
        with self.assertLogs('twinbf.bf', logging.DEBUG) as cm:
            self.run_code('+}.')
        steps = [line for line in cm.output if ' pc=' in line]
        self.assertEqual(3, len(steps))
        self.assertIn('#3 pc=2 op=. head0=0 head1=1 cell[1]=1', steps[-1])

    def test_direct_steps_logged(self):
        interpreter = Interpreter('++')
        with self.assertLogs('twinbf.bf', logging.DEBUG) as cm:
            interpreter.step()
        self.assertEqual(1, len(cm.output))

    def test_execute(self):
        interpreter = execute('++[>+<-]')
        self.assertEqual({0: 0, 1: 2}, interpreter.tape.snapshot())
