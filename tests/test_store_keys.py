"""
Test Suite for Store Keys

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import fnmatch
import hashlib
from datetime import timedelta

from conftest import TODAY, make_series
from store import keys


def test_slug_consistency():
    v = "hello"
    assert keys._slug(v) == hashlib.sha256(v.encode()).hexdigest()[:32]


def test_fingerprint_stable_for_same_snapshot():
    series = make_series((0, 200.0), (7, 198.0))
    deadline = TODAY + timedelta(days=90)
    assert keys.fingerprint(series, 150.0, deadline) == keys.fingerprint(list(series), 150.0, deadline)


def test_fingerprint_changes_with_inputs():
    series = make_series((0, 200.0), (7, 198.0))
    deadline = TODAY + timedelta(days=90)
    base = keys.fingerprint(series, 150.0, deadline)
    more = make_series((0, 200.0), (7, 198.0), (14, 197.0))
    assert keys.fingerprint(more, 150.0, deadline) != base
    assert keys.fingerprint(series, 155.0, deadline) != base
    assert keys.fingerprint(series, 150.0, deadline + timedelta(days=1)) != base
    assert keys.fingerprint(series, 150.0, deadline, fallback_rate=-1.0) != base
    assert keys.fingerprint(series, 150.0, deadline, today=TODAY) != base


def test_report_keys_format():
    key = keys.report("goal-1", "abc")
    assert key == f"pp:{keys._slug('goal-1')}:report:abc"
    assert fnmatch.fnmatch(key, keys.reports("goal-1"))
    assert not fnmatch.fnmatch(key, keys.reports("goal-2"))


def test_fingerprint_covers_goal_endpoints():
    series = make_series((0, 200.0), (7, 198.0))
    deadline = TODAY + timedelta(days=90)
    base = keys.fingerprint(series, 150.0, deadline, start_value=200.0, current_value=198.0)
    assert keys.fingerprint(series, 150.0, deadline, start_value=210.0, current_value=198.0) != base
    assert keys.fingerprint(series, 150.0, deadline, start_value=200.0, current_value=197.0) != base
