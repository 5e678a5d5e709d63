import unittest

from optionpy import (
    Some,
    NONE,
    SomeE,
    NoneE,
    ArgumentError,
    some,
    none,
    some_e,
    some_when,
    none_when,
    some_not_null,
    to_option,
    flatten,
    value_or_exception,
    match,
    match_cause,
    map,
    flat_map,
)


class TestPredicateConstructors(unittest.TestCase):
    def test_some_when_scenarios(self):
        self.assertEqual(some_when(5, lambda x: x > 3).match(lambda x: x * 2, lambda: -1), 10)
        self.assertEqual(some_when(2, lambda x: x > 3).match(lambda x: x * 2, lambda: -1), -1)

    def test_some_when_with_cause(self):
        self.assertEqual(some_when(5, lambda x: x > 3, "small"), SomeE(5))
        self.assertEqual(some_when(2, lambda x: x > 3, "small"), NoneE("small"))

    def test_cause_factory_only_called_on_false_branch(self):
        calls = []
        def factory():
            calls.append(1)
            return "small"
        self.assertEqual(some_when(5, lambda x: x > 3, cause_factory=factory), SomeE(5))
        self.assertEqual(calls, [])
        self.assertEqual(some_when(2, lambda x: x > 3, cause_factory=factory), NoneE("small"))
        self.assertEqual(calls, [1])

    def test_missing_predicate_is_argument_error(self):
        with self.assertRaises(ArgumentError) as cm:
            some_when(1, None)  # type: ignore[arg-type]
        self.assertEqual(cm.exception.argument, "predicate")
        with self.assertRaises(ArgumentError):
            none_when(1, None, "cause")  # type: ignore[arg-type]
        with self.assertRaises(ArgumentError):
            some_when(1, "not callable")  # type: ignore[arg-type]

    def test_cause_factory_validation(self):
        with self.assertRaises(ArgumentError) as cm:
            some_when(1, lambda x: True, cause_factory=None)
        self.assertEqual(cm.exception.argument, "cause_factory")
        with self.assertRaises(ArgumentError):
            some_when(1, lambda x: True, "c", cause_factory=lambda: "d")
        # ArgumentError doubles as ValueError
        with self.assertRaises(ValueError):
            some_not_null(1, cause_factory=42)

    def test_none_when_is_complement(self):
        self.assertIs(none_when(5, lambda x: x > 3), NONE)
        self.assertEqual(none_when(2, lambda x: x > 3), Some(2))
        self.assertEqual(none_when(5, lambda x: x > 3, "big"), NoneE("big"))
        self.assertEqual(none_when(5, lambda x: x > 3, cause_factory=lambda: "big"), NoneE("big"))
        self.assertEqual(none_when(2, lambda x: x > 3, "big"), SomeE(2))

    def test_none_when_cause_factory_is_lazy(self):
        calls = []
        def factory():
            calls.append(1)
            return "big"
        self.assertEqual(none_when(2, lambda x: x > 3, cause_factory=factory), SomeE(2))
        self.assertEqual(calls, [])
        self.assertEqual(none_when(5, lambda x: x > 3, cause_factory=factory), NoneE("big"))
        self.assertEqual(calls, [1])

    def test_some_not_null(self):
        self.assertEqual(some_not_null(0), Some(0))
        self.assertIs(some_not_null(None), NONE)
        self.assertEqual(some_not_null(None, "null"), NoneE("null"))
        self.assertEqual(some_not_null("x", "null"), SomeE("x"))
        self.assertEqual(some_not_null(None, cause_factory=lambda: "made"), NoneE("made"))


class TestToOption(unittest.TestCase):
    def test_scenarios(self):
        self.assertEqual(to_option(7).match(lambda x: x, lambda: 0), 7)
        self.assertEqual(to_option(None).match(lambda x: x, lambda: 0), 0)

    def test_with_cause(self):
        self.assertEqual(to_option(7, "empty"), SomeE(7))
        self.assertEqual(to_option(None, "empty"), NoneE("empty"))

    def test_factory_not_called_when_value_present(self):
        calls = []
        self.assertEqual(to_option(False, cause_factory=lambda: calls.append(1)), SomeE(False))
        self.assertEqual(calls, [])
        self.assertEqual(to_option(None, cause_factory=lambda: "empty"), NoneE("empty"))


class TestStructural(unittest.TestCase):
    def test_flatten_option(self):
        self.assertEqual(flatten(some(some(1))), Some(1))
        self.assertIs(flatten(some(none())), NONE)
        self.assertIs(flatten(none()), NONE)

    def test_flatten_option_e_cause_precedence(self):
        self.assertEqual(flatten(SomeE(SomeE(1))), SomeE(1))
        self.assertEqual(flatten(SomeE(NoneE("inner"))), NoneE("inner"))
        self.assertEqual(flatten(NoneE("outer")), NoneE("outer"))

    def test_value_or_exception(self):
        self.assertEqual(value_or_exception(some_e("v")), "v")
        self.assertEqual(value_or_exception(none("c")), "c")

    def test_free_map_and_flat_map(self):
        self.assertEqual(map(some(1), lambda x: x + 1), Some(2))
        self.assertEqual(map(none("c"), lambda x: x + 1), NoneE("c"))
        self.assertEqual(flat_map(some(1), lambda x: some_when(x, lambda v: v > 1)), NONE)


class TestMatch(unittest.TestCase):
    def test_two_handlers(self):
        self.assertEqual(match(some(1), lambda x: x, lambda: 0), 1)
        self.assertEqual(match(none(), lambda x: x, lambda: 0), 0)
        self.assertEqual(match(none("c"), lambda x: x, lambda c: c), "c")

    def test_nested_cause_dispatch(self):
        err = ValueError("bad")
        handlers = (lambda v: ("some", v), lambda e: ("cause", e), lambda: ("none",))
        self.assertEqual(match(SomeE(1), *handlers), ("some", 1))
        self.assertEqual(match(NoneE(Some(err)), *handlers), ("cause", err))
        self.assertEqual(match(NoneE(NONE), *handlers), ("none",))
        self.assertEqual(match_cause(NoneE(NONE), *handlers), ("none",))

    def test_side_effect_handlers(self):
        seen = []
        match(NoneE(Some("e")), seen.append, seen.append, lambda: seen.append("none"))
        match(NoneE(NONE), seen.append, seen.append, lambda: seen.append("none"))
        self.assertEqual(seen, ["e", "none"])
