#!/usr/bin/env python3
"""
Tests for command dispatch and loop handling in the interpreter.
"""

import pytest

from bfstream import Interpreter, SourceCursor, TapeUnderflowError, run_string


def run(source):
    interp = Interpreter(SourceCursor(source))
    interp.run()
    return interp


def test_increment_then_output_emits_count():
    for n in range(256):
        assert run_string('+' * n + '.').output == bytes([n])


def test_256_increments_wrap_to_zero():
    assert run_string('+' * 256 + '.').output == b'\x00'


def test_decrement_fresh_cell_wraps_to_255():
    assert run_string('-.').output == b'\xff'


def test_empty_program():
    result = run_string('')
    assert result.output == b''
    assert result.tape == b'\x00'
    assert result.pointer == 0
    assert result.steps == 0


def test_unknown_characters_are_comments():
    assert run_string('hello + world + .').output == b'\x02'


def test_zero_counter_skips_body():
    result = run_string('[>+++.<]')
    assert result.output == b''
    assert result.tape == b'\x00'


def test_skip_honours_nested_loops():
    assert run_string('[[+]+]+.').output == b'\x01'


def test_counter_cell_fixed_at_loop_entry():
    # The body leaves the pointer on cell 2, but ']' keeps testing cell 0.
    result = run_string('+++[->>+.]')
    assert result.output == b'\x01\x02\x03'
    assert result.tape == b'\x00\x00\x03'


def test_pointer_stays_where_body_left_it_on_exit():
    result = run_string('+[->>]')
    assert result.pointer == 2
    assert len(result.tape) == 3


def test_nested_loops():
    assert run_string('++[>+++[>+<-]<-]>>.').output == b'\x06'


def test_deep_nesting_does_not_recurse():
    depth = 10000
    interp = run('+' + '[' * depth + '-' + ']' * depth)
    assert interp.halted
    assert interp.state.frames == []
    assert interp.tape.current() == 0


def test_stray_closer_halts():
    assert run_string('+.].').output == b'\x01'


def test_unclosed_loop_ends_at_end_of_source():
    interp = run('+[.')
    assert interp.output == b'\x01'
    assert len(interp.state.frames) == 1


def test_skip_to_end_of_source():
    interp = run('[+++')
    assert interp.output == b''
    assert interp.halted


def test_move_left_of_first_cell_raises_underflow():
    with pytest.raises(TapeUnderflowError) as excinfo:
        run_string('+\n>\n<<')
    err = excinfo.value
    assert (err.line, err.column) == (3, 2)
    assert 'TapeUnderflow' in str(err)


def test_step_reports_end():
    interp = Interpreter(SourceCursor('+'))
    assert interp.step() is True
    assert interp.step() is False
    assert interp.step() is False


def test_reset_allows_rerun():
    interp = run('+++.>+.')
    first = interp.output
    interp.reset()
    assert interp.output == b''
    assert interp.run() == first
    assert len(interp.tape) == 2


def test_trace_records_each_command():
    interp = Interpreter(SourceCursor('+x+'), trace=True)
    interp.run()
    assert interp.state.steps == 2
    assert interp.state.trace[0] == '     0 + ptr=0 cell=1'
    assert interp.state.trace[1] == '     2 + ptr=0 cell=2'
    assert interp.state.trace[-1] == 'end of source'


def test_trace_off_by_default():
    interp = run('++')
    assert interp.state.trace == []
