import logging

import pytest
from storm.tracer import get_tracers

from rosterlib.database.debug import (RosterDebugTracer, disable_debugging,
                                      enable_debugging)


@pytest.fixture
def tracer():
    tracer = enable_debugging()
    yield tracer
    disable_debugging()


def test_enable_debugging_once():
    try:
        enable_debugging()
        tracer = enable_debugging()
        tracers = [t for t in get_tracers() if isinstance(t, RosterDebugTracer)]
        assert tracers == [tracer]
    finally:
        disable_debugging()
    assert not [t for t in get_tracers() if isinstance(t, RosterDebugTracer)]


def test_statements_are_logged(store, tracer, caplog):
    caplog.set_level(logging.DEBUG, logger='rosterlib.database.debug')
    store.execute('SELECT name FROM store WHERE name = ?', ('CMU', ))

    messages = [r.getMessage() for r in caplog.records
                if r.name == 'rosterlib.database.debug']
    assert any('SELECT name FROM store WHERE name =' in m for m in messages)
    assert any('rows' in m for m in messages)


def test_custom_logger(store, caplog):
    logger = logging.getLogger('rosterlib.test.sql')
    caplog.set_level(logging.DEBUG, logger='rosterlib.test.sql')
    enable_debugging(logger)
    try:
        store.execute('SELECT 1')
    finally:
        disable_debugging()

    assert any('SELECT 1' in r.getMessage() for r in caplog.records
               if r.name == 'rosterlib.test.sql')
