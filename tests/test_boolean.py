"""
Tests for the Boolean value type and its singletons.

These tests verify:
    - Singleton identity and idempotent conversion
    - Type-based (not truth-based) boolean detection
    - Numeric, string and logical coercion
    - Independent construction and immutability
"""

import copy
import operator

import pytest

import typeserial
from typeserial.boolean import (
    Boolean,
    false,
    is_bool,
    is_false,
    is_true,
    shared_type,
    shared_type_name,
    to_bool,
    true,
)
from typeserial.error_value import error
from typeserial.registry import TYPE_CAPABILITY, CapabilityRegistry


class TestSingletons:
    """Test the canonical true/false objects."""

    def test_true_is_stable(self):
        """Repeated calls return the same instance."""
        assert true() is true()

    def test_false_is_stable(self):
        assert false() is false()

    def test_true_and_false_differ(self):
        assert true() is not false()
        assert true() != false()

    def test_package_exports_same_singletons(self):
        """The package-level functions hand out the module singletons."""
        assert typeserial.true() is true()
        assert typeserial.false() is false()

    def test_repr(self):
        assert repr(true()) == "typeserial.true"
        assert repr(false()) == "typeserial.false"
        assert repr(Boolean(True)) == "Boolean(True)"

    def test_copy_keeps_identity(self):
        """Copying a tree must not multiply the singletons."""
        tree = {"flags": [true(), false()]}
        cloned = copy.deepcopy(tree)
        assert cloned["flags"][0] is true()
        assert copy.copy(false()) is false()


class TestIsBool:
    """Test the type-based predicate."""

    def test_singletons_are_bools(self):
        assert is_bool(true())
        assert is_bool(false())

    @pytest.mark.parametrize("value", [True, False, 1, 0, 1.0, "1", "true", None, object(), [], {}])
    def test_other_values_are_not_bools(self, value):
        """Native bools, numbers, strings and arbitrary objects are rejected."""
        assert not is_bool(value)

    def test_independent_instance_is_bool(self):
        assert is_bool(Boolean(True))

    def test_foreign_shared_type_is_bool(self):
        """Instances of a class bound to the shared name count as booleans."""

        class ForeignBoolean:
            def __init__(self, value):
                self.value = value

        registry = CapabilityRegistry()
        registry.register_if_absent(TYPE_CAPABILITY, ForeignBoolean, owner="foreign")

        assert is_bool(ForeignBoolean(1), registry)
        assert is_bool(true(), registry)
        assert not is_bool(1, registry)

    def test_non_class_binding_is_ignored(self):
        registry = CapabilityRegistry()
        registry.register_if_absent(TYPE_CAPABILITY, "not a class")
        assert not is_bool("not a class", registry)


class TestToBool:
    """Test conversion to the canonical singletons."""

    @pytest.mark.parametrize("value", [True, 1, -3, 0.5, "x", "0", [0], object()])
    def test_truthy_values(self, value):
        assert to_bool(value) is true()

    @pytest.mark.parametrize("value", [False, 0, 0.0, "", None, [], {}, ()])
    def test_falsy_values(self, value):
        assert to_bool(value) is false()

    def test_idempotent(self):
        """to_bool(to_bool(x)) is to_bool(x)."""
        for value in (True, False, 7, ""):
            assert to_bool(to_bool(value)) is to_bool(value)

    def test_independent_instance_maps_to_singleton(self):
        assert to_bool(Boolean(True)) is true()
        assert to_bool(Boolean(False)) is false()

    def test_error_sentinel_maps_to_false(self):
        assert to_bool(error()) is false()

    def test_refused_truth_test_maps_to_false(self):
        """Values whose truth test raises (e.g. multi-element arrays) never raise here."""

        class Ambiguous:
            def __bool__(self):
                raise ValueError("truth value is ambiguous")

        assert to_bool(Ambiguous()) is false()
        assert not is_true(Ambiguous())


class TestCoercion:
    """Test numeric, string and logical contexts."""

    def test_numeric(self):
        assert int(true()) == 1
        assert int(false()) == 0
        assert float(true()) == 1.0
        assert operator.index(false()) == 0
        assert true().to_number() == 1

    def test_usable_as_index(self):
        assert ["no", "yes"][true()] == "yes"

    def test_string(self):
        assert str(true()) == "1"
        assert str(false()) == "0"
        assert f"{true()}" == "1"
        assert false().to_string() == "0"

    def test_logical(self):
        assert bool(true()) is True
        assert bool(false()) is False
        assert true().to_bool() is True
        taken = "then" if false() else "else"
        assert taken == "else"
        assert not false()

    def test_equality_is_numeric(self):
        assert true() == 1
        assert true() == True  # noqa: E712
        assert false() == 0.0
        assert Boolean(True) == true()
        assert true() != "1"

    def test_hash_matches_number(self):
        lookup = {1: "one", 0: "zero"}
        assert lookup[true()] == "one"
        assert lookup[false()] == "zero"
        assert len({true(), Boolean(1), 1}) == 1


class TestIndependentConstruction:
    """Test Boolean(x) instances."""

    def test_normalises_truth_value(self):
        assert Boolean(5).value == 1
        assert Boolean("").value == 0
        assert Boolean().value == 0

    def test_not_identical_to_singleton(self):
        value = Boolean(True)
        assert value is not true()
        assert value == true()
        assert is_bool(value)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            true().value = 0


class TestArithmetic:
    """Increment/decrement produce new values and never touch singletons."""

    def test_add_returns_int(self):
        assert true() + 1 == 2
        assert 1 + true() == 2
        assert true() + true() == 2
        assert type(true() + 0) is int

    def test_sub(self):
        assert true() - 1 == 0
        assert 5 - true() == 4
        assert -true() == -1

    def test_increment_does_not_corrupt_singleton(self):
        flag = true()
        flag += 1
        assert flag == 2
        assert int(true()) == 1
        assert true().value == 1

    def test_ordering(self):
        assert true() > false()
        assert false() < true()
        assert true() >= 1
        assert false() <= 0
        assert 2 > true()
        assert sorted([true(), false(), Boolean(1)]) == [0, 1, 1]
        assert max(false(), true()) is true()

    def test_mul_and_division(self):
        assert true() * 3 == 3
        assert 3 * false() == 0
        assert type(true() * 3) is int
        assert true() / 2 == 0.5
        assert 4 / true() == 4.0
        assert 7 // true() == 7
        assert true() // 2 == 0
        assert 5 % 2 * true() == 1
        assert true() % 2 == 1
        with pytest.raises(ZeroDivisionError):
            true() / false()

    def test_unary(self):
        assert abs(true()) == 1
        assert +false() == 0
        assert type(+true()) is int

    def test_bitwise(self):
        assert true() & true() == 1
        assert true() & false() == 0
        assert false() | 1 == 1
        assert 3 ^ true() == 2
        assert type(true() | false()) is int
        with pytest.raises(TypeError):
            true() & 1.5

    def test_format(self):
        assert format(true(), "d") == "1"
        assert f"{false():03d}" == "000"
        assert f"{true():.1f}" == "1.0"

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            true() + "x"


class TestIsTrueIsFalse:
    """Test the typed truth predicates."""

    def test_is_true(self):
        assert is_true(true())
        assert is_true(Boolean(1))
        assert not is_true(false())
        assert not is_true(True)
        assert not is_true(1)

    def test_is_false(self):
        assert is_false(false())
        assert not is_false(true())
        assert not is_false(False)
        assert not is_false(0)
        assert not is_false(None)


class TestSharedType:
    """Test the shared type accessors."""

    def test_shared_type_name(self):
        assert shared_type_name() == "JSON::PP::Boolean"
        assert shared_type_name(CapabilityRegistry(type_name="other.Bool")) == "other.Bool"

    def test_shared_type_defaults_to_boolean(self):
        assert shared_type(CapabilityRegistry()) is Boolean

    def test_shared_type_follows_registry(self):
        class ForeignBoolean:
            pass

        registry = CapabilityRegistry()
        registry.register_if_absent(TYPE_CAPABILITY, ForeignBoolean)
        assert shared_type(registry) is ForeignBoolean
