"""Tests for recordkit.types (type resolution)."""

import pytest

from recordkit import UnknownTypeError
from recordkit.types import (
    ArrayOf,
    MixedType,
    RecordRef,
    ScalarKind,
    ScalarType,
    TypeResolver,
    is_array_type,
    strip_array_marker,
)


def _resolver(*records, strict=False):
    return TypeResolver(lambda name: name in records, strict=strict)


class TestScalarResolution:
    """Scalar keywords and their alternative spellings."""

    @pytest.mark.parametrize(
        "raw_type,kind",
        [
            ("bool", ScalarKind.BOOL),
            ("boolean", ScalarKind.BOOL),
            ("int", ScalarKind.INT),
            ("integer", ScalarKind.INT),
            ("long", ScalarKind.INT),
            ("string", ScalarKind.STRING),
            ("float", ScalarKind.FLOAT),
            ("double", ScalarKind.FLOAT),
        ],
    )
    def test_keywords(self, raw_type, kind):
        assert _resolver().resolve(raw_type) == ScalarType(kind)

    def test_keywords_are_case_sensitive(self):
        """Only the lowercase spellings are scalar keywords."""
        assert _resolver().resolve("String") == MixedType()


class TestCompositeResolution:
    """Arrays, record references and the mixed fallback."""

    def test_array_of_scalar(self):
        assert _resolver().resolve("int[]") == ArrayOf(ScalarType(ScalarKind.INT))

    def test_nested_arrays(self):
        descriptor = _resolver("Pet").resolve("Pet[][]")
        assert descriptor == ArrayOf(ArrayOf(RecordRef("Pet")))

    def test_record_reference(self):
        assert _resolver("Pet").resolve("Pet") == RecordRef("Pet")

    def test_unknown_name_is_mixed(self):
        assert _resolver().resolve("Whatever") == MixedType()
        assert _resolver().resolve("mixed") == MixedType()

    def test_descriptors_render_raw_type(self):
        resolver = _resolver("Pet")
        assert str(resolver.resolve("Pet[]")) == "Pet[]"
        assert str(resolver.resolve("long")) == "int"
        assert str(resolver.resolve("anything")) == "mixed"

    def test_array_marker_helpers(self):
        assert is_array_type("Pet[]")
        assert not is_array_type("Pet")
        assert strip_array_marker("Pet[][]") == "Pet[]"


class TestStrictResolution:
    """Strict mode rejects names it cannot interpret."""

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownTypeError) as exc_info:
            _resolver(strict=True).resolve("Animal", record_type="Person", field_name="pet")

        assert exc_info.value.type_name == "Animal"
        assert exc_info.value.record_type == "Person"
        assert exc_info.value.field_name == "pet"

    def test_unknown_array_item_raises(self):
        with pytest.raises(UnknownTypeError):
            _resolver(strict=True).resolve("Animal[]")

    @pytest.mark.parametrize("raw_type", ["mixed", "array", "object", "any"])
    def test_pseudo_types_are_mixed(self, raw_type):
        assert _resolver(strict=True).resolve(raw_type) == MixedType()

    def test_known_records_resolve(self):
        assert _resolver("Pet", strict=True).resolve("Pet[]") == ArrayOf(RecordRef("Pet"))


class TestMalformedTypes:
    """Malformed raw types are configuration errors in every mode."""

    @pytest.mark.parametrize("raw_type", ["", "Pet[", "[]", "Pet []", "list<int>", "int[]x"])
    def test_malformed_raises(self, raw_type):
        with pytest.raises(UnknownTypeError):
            _resolver("Pet").resolve(raw_type)
