import pytest
from hamcrest import assert_that, contains_string, is_

from matchers import AllOf, AnyOf, Equals, Not, all_of, any_of, equal_to, is_not, structurally_equal

VALUES = [0, 1, 1.0, 200, 404, "doggie", "", True, False, None, [1, 2], {"name": "doggie"}]

MATCHER_SETS = [
    [Equals(200)],
    [Equals(200), Equals(404)],
    [Equals("doggie"), Not(Equals(""))],
    [Equals(None), Equals([1, 2]), Equals({"name": "doggie"})],
]


@pytest.mark.parametrize("value", VALUES)
@pytest.mark.parametrize("expected", [200, "doggie", None, [1, 2]])
def test_not_is_negation(expected, value):
    m = Equals(expected)
    assert Not(m).evaluate(value) is (not m.evaluate(value))


@pytest.mark.parametrize("matchers", MATCHER_SETS)
@pytest.mark.parametrize("value", VALUES)
def test_any_of_and_all_of_laws(matchers, value):
    outcomes = [m.evaluate(value) for m in matchers]
    assert AnyOf(matchers).evaluate(value) is any(outcomes)
    assert AllOf(matchers).evaluate(value) is all(outcomes)


def test_numeric_equality_ignores_int_float_representation():
    assert Equals(1001).evaluate(1001.0)
    assert Equals(2.5).evaluate(2.5)
    assert not Equals(1001).evaluate(1002)


def test_cross_type_comparison_is_false_not_error():
    assert not Equals(1001).evaluate("1001")
    assert not Equals("1001").evaluate(1001)
    assert not Equals({"a": 1}).evaluate([("a", 1)])
    assert not Equals([1]).evaluate("1")
    assert not Equals(1).evaluate(None)


def test_booleans_are_not_numbers():
    assert not Equals(1).evaluate(True)
    assert not Equals(False).evaluate(0)
    assert Equals(True).evaluate(True)


def test_string_equality_is_exact():
    assert not Equals("Doggie").evaluate("doggie")
    assert not Equals("doggie").evaluate("doggie ")


def test_nested_structures_compare_elementwise():
    expected = {"id": 1, "tags": [{"name": "friendly", "weight": 1}]}
    assert structurally_equal(expected, {"id": 1.0, "tags": [{"name": "friendly", "weight": 1.0}]})
    assert not structurally_equal(expected, {"id": 1, "tags": []})
    assert not structurally_equal(expected, {"id": 1, "tags": [{"name": "friendly"}]})


def test_plain_values_are_wrapped_in_equals():
    status = any_of(200, 404)
    assert status.evaluate(404)
    assert not status.evaluate(500)
    assert all(isinstance(m, Equals) for m in status.matchers)


def test_matchers_are_reusable():
    ok = equal_to(200)
    assert [ok.evaluate(v) for v in (200, 500, 200)] == [True, False, True]


def test_factories_build_the_closed_variants():
    assert isinstance(all_of(1, 1.0), AllOf)
    assert isinstance(is_not(1), Not)
    assert is_not(equal_to("x")).evaluate("y")


def test_descriptions():
    assert_that(Equals("doggie").describe(), is_("'doggie'"))
    assert_that(any_of(200, 404).describe(), contains_string(" or "))
    assert_that(all_of(1, 2).describe(), contains_string(" and "))
    assert_that(is_not("x").describe(), contains_string("not 'x'"))


def test_kit_matchers_plug_into_hamcrest_assert_that():
    assert_that(404, any_of(200, 404))
    with pytest.raises(AssertionError):
        assert_that("cat", equal_to("doggie"))
