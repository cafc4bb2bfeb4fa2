#!/usr/bin/env python3
"""
Tests for the optional delimiter balance check.
"""

import pytest

from bfstream import MalformedProgramError, UnbalancedLoopError, check_balance


def test_balanced_program_passes():
    check_balance('++[>[-]<-] note that [ and ] pair up')


def test_stray_closer_reported_at_its_position():
    with pytest.raises(UnbalancedLoopError) as excinfo:
        check_balance('+\n+]')
    err = excinfo.value
    assert (err.line, err.column) == (2, 2)
    assert "unmatched ']'" in err.message
    assert 'Hint:' in err.message
    assert '^' in err.context


def test_unclosed_opener_reports_innermost():
    with pytest.raises(MalformedProgramError) as excinfo:
        check_balance('[+[-')
    err = excinfo.value
    assert (err.line, err.column) == (1, 3)
    assert '2 open' in err.message
