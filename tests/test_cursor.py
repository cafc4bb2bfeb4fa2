#!/usr/bin/env python3
"""
Tests for the source cursor.
"""

from bfstream import SourceCursor


def test_next_walks_source_then_returns_none():
    cursor = SourceCursor("+-")
    assert cursor.next() == '+'
    assert cursor.next() == '-'
    assert cursor.next() is None
    assert cursor.next() is None
    assert cursor.exhausted


def test_seek_rewinds():
    cursor = SourceCursor("abc")
    cursor.next()
    cursor.next()
    cursor.seek(1)
    assert cursor.position == 1
    assert cursor.next() == 'b'


def test_from_bytes_maps_each_byte_to_one_char():
    cursor = SourceCursor.from_bytes(b'+\xff.')
    assert len(cursor) == 3
    assert cursor.next() == '+'
    assert cursor.next() == '\xff'
    assert cursor.next() == '.'


def test_location_is_one_based():
    cursor = SourceCursor("++\n+<\n")
    assert cursor.location(0) == (1, 1)
    assert cursor.location(4) == (2, 2)
