"""Unit tests for the type matching oracle."""

import pytest

from daolint.adapters.base import KnowledgeBase
from daolint.core.models import TypeMatch, TypeReference
from daolint.engine.oracle import TypeOracle, classify_type


def ref(text: str) -> TypeReference:
    return TypeReference(text)


@pytest.fixture
def oracle(knowledge: KnowledgeBase) -> TypeOracle:
    return TypeOracle(knowledge)


class TestNameMatching:
    """Tests for entity name equality and containment."""

    def test_exact_name(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("Invoice"), "Invoice") == TypeMatch.MATCH

    @pytest.mark.parametrize("name", ["InvoiceDTO", "AnyCrazyInvoiceType", "SuperInvoice"])
    def test_contains_entity_name(self, oracle: TypeOracle, name: str) -> None:
        assert oracle.classify(ref(name), "Invoice") == TypeMatch.MATCH

    def test_containment_is_case_sensitive(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("invoiceDTO"), "Invoice") == TypeMatch.MISMATCH

    def test_qualified_name_uses_simple_name(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("com.acme.Invoice"), "Invoice") == TypeMatch.MATCH
        assert oracle.classify(ref("com.Invoice.Car"), "Invoice") == TypeMatch.MISMATCH

    def test_unrelated_type(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("Car"), "Invoice") == TypeMatch.MISMATCH

    def test_array_of_entity(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("Invoice[]"), "Invoice") == TypeMatch.MATCH
        assert oracle.classify(ref("Car..."), "Invoice") == TypeMatch.MISMATCH


class TestGenerics:
    """Parameterized types always match; arguments are not inspected."""

    @pytest.mark.parametrize(
        "text", ["List<Invoice>", "Set<Invoice>", "Map<A,B>", "Map<A,B,C>", "List<Integer>", "List<Car>"]
    )
    def test_parameterized_types_match(self, oracle: TypeOracle, text: str) -> None:
        assert oracle.classify(ref(text), "Invoice") == TypeMatch.MATCH


class TestTypeVariables:
    """Tests for type variable bound resolution."""

    def test_bound_to_entity(self, oracle: TypeOracle) -> None:
        bounds = {"T": ref("Invoice")}
        assert oracle.classify(ref("T"), "Invoice", bounds) == TypeMatch.MATCH

    def test_bound_to_unrelated(self, oracle: TypeOracle) -> None:
        bounds = {"T": ref("Car")}
        assert oracle.classify(ref("T"), "Invoice", bounds) == TypeMatch.MISMATCH

    def test_bound_to_trivial(self, oracle: TypeOracle) -> None:
        bounds = {"N": ref("Long")}
        assert oracle.classify(ref("N"), "Invoice", bounds) == TypeMatch.TRIVIAL

    def test_chained_bounds(self, oracle: TypeOracle) -> None:
        bounds = {"T": ref("U"), "U": ref("Invoice")}
        assert oracle.classify(ref("T"), "Invoice", bounds) == TypeMatch.MATCH

    def test_missing_bound_is_mismatch(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("T"), "Invoice") == TypeMatch.MISMATCH

    def test_cyclic_bound_is_mismatch(self, oracle: TypeOracle) -> None:
        bounds = {"T": ref("U"), "U": ref("T")}
        assert oracle.classify(ref("T"), "Invoice", bounds) == TypeMatch.MISMATCH

    def test_generic_bound_matches(self, oracle: TypeOracle) -> None:
        bounds = {"T": ref("Comparable<T>")}
        assert oracle.classify(ref("T"), "Invoice", bounds) == TypeMatch.MATCH


class TestKnowledgeBase:
    """Tests for enumerator and supertype lookups."""

    def test_enumerator(self) -> None:
        kb = KnowledgeBase(enumerators={"PaymentInfoEnum"})
        assert classify_type(ref("PaymentInfoEnum"), "Invoice", kb) == TypeMatch.MATCH

    def test_registered_subtype(self) -> None:
        kb = KnowledgeBase(supertypes={"Receipt": {"Invoice"}})
        assert classify_type(ref("Receipt"), "Invoice", kb) == TypeMatch.MATCH

    def test_subtype_single_level_by_default(self) -> None:
        kb = KnowledgeBase(supertypes={"Receipt": {"Document"}, "Document": {"Invoice"}})
        assert classify_type(ref("Receipt"), "Invoice", kb) == TypeMatch.MISMATCH

    def test_subtype_transitive_when_enabled(self) -> None:
        kb = KnowledgeBase(supertypes={"Receipt": {"Document"}, "Document": {"Invoice"}})
        result = classify_type(ref("Receipt"), "Invoice", kb, transitive_supertypes=True)
        assert result == TypeMatch.MATCH

    def test_enumerator_wins_over_trivial(self) -> None:
        kb = KnowledgeBase(enumerators={"String"})
        assert classify_type(ref("String"), "Invoice", kb) == TypeMatch.MATCH


class TestTrivialTypes:
    """Tests for the primitive/value whitelist."""

    @pytest.mark.parametrize(
        "name",
        ["boolean", "int", "Integer", "String", "BigDecimal", "Calendar", "double", "Long", "long"],
    )
    def test_whitelisted(self, oracle: TypeOracle, name: str) -> None:
        assert oracle.classify(ref(name), "Invoice") == TypeMatch.TRIVIAL

    def test_primitive_array(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("int..."), "Invoice") == TypeMatch.TRIVIAL

    def test_custom_whitelist(self, knowledge: KnowledgeBase) -> None:
        oracle = TypeOracle(knowledge, trivial_types={"Money"})
        assert oracle.trivial_types == frozenset({"Money"})
        assert oracle.classify(ref("Money"), "Invoice") == TypeMatch.TRIVIAL
        assert oracle.classify(ref("int"), "Invoice") == TypeMatch.MISMATCH

    def test_entity_name_checked_before_whitelist(self, oracle: TypeOracle) -> None:
        assert oracle.classify(ref("String"), "String") == TypeMatch.MATCH
