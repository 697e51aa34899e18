"""
Tests for the pytest golden plugin, run in isolated pytester sessions.
"""

import json

import pytest

from golden.pytest_plugin import assert_entities_match
from tests.builders import create_scope_spans, create_span, create_traces_payload, parse

NAME = "chromium-demo-session.json"


def create_payload(x):
    return create_traces_payload(create_scope_spans("app", [create_span("click", {"x": x})]))


def write_golden_test(pytester, x):
    pytester.makepyfile(
        f"""
        PAYLOAD = {create_payload(x)!r}


        def test_session_matches_golden(assert_golden):
            assert_golden(PAYLOAD, {NAME!r})
        """
    )


def write_golden_file(pytester, x):
    golden_dir = pytester.path / "goldens"
    golden_dir.mkdir(exist_ok=True)
    path = golden_dir / NAME
    path.write_text(json.dumps(create_payload(x), indent=2), encoding="utf-8")
    return path


def test_first_run_creates_golden_file(pytester):
    write_golden_test(pytester, 1)

    result = pytester.runpytest("-p", "golden.pytest_plugin", "--golden-dir", "goldens")

    result.assert_outcomes(passed=1)
    assert json.loads((pytester.path / "goldens" / NAME).read_text(encoding="utf-8")) == create_payload(1)


def test_mismatch_fails_with_comparison_message(pytester):
    write_golden_file(pytester, 1)
    write_golden_test(pytester, 2)

    result = pytester.runpytest("-p", "golden.pytest_plugin", "--golden-dir", "goldens")

    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*expected x to be 1, but got x with value 2*"])


def test_update_option_overwrites_golden_file(pytester):
    path = write_golden_file(pytester, 1)
    write_golden_test(pytester, 2)

    result = pytester.runpytest("-p", "golden.pytest_plugin", "--golden-dir", "goldens", "--update-golden")

    result.assert_outcomes(passed=1)
    assert json.loads(path.read_text(encoding="utf-8")) == create_payload(2)


def test_update_environment_flag_overwrites_golden_file(pytester, monkeypatch):
    path = write_golden_file(pytester, 1)
    write_golden_test(pytester, 2)
    monkeypatch.setenv("UPDATE_GOLDEN", "1")

    result = pytester.runpytest("-p", "golden.pytest_plugin", "--golden-dir", "goldens")

    result.assert_outcomes(passed=1)
    assert json.loads(path.read_text(encoding="utf-8")) == create_payload(2)


def test_assert_entities_match_passes_for_equal_trees():
    tree = parse(create_payload(1))

    assert assert_entities_match(tree, tree).passed


def test_assert_entities_match_fails_the_test():
    with pytest.raises(pytest.fail.Exception, match="Attribute mismatch"):
        assert_entities_match(parse(create_payload(2)), parse(create_payload(1)))
