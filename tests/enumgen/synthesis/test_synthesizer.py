"""Tests for the enum synthesizer."""

import ast

import pytest

from enumgen.extraction.annotation import AnnotationExtractor
from enumgen.extraction.models import EnumDef, EnumValue
from enumgen.scanning import parse_source
from enumgen.synthesis.synthesizer import (
    EnumSynthesizer,
    SynthesisError,
    generated_names,
    output_filename,
)
from enumgen.utils.file_utils import GENERATED_HEADER, is_generated_source


def _enum(name, pairs, plural=None):
    return EnumDef(
        name=name,
        plural=plural,
        values=[
            EnumValue(constant_name=constant, string_value=value)
            for constant, value in pairs
        ],
    )


def _load(source):
    """Execute generated source and return its namespace."""
    namespace = {"__name__": "generated_enum"}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


@pytest.fixture
def status_enum():
    return _enum("Status", [("Pending", "pending"), ("Active", "active")])


@pytest.fixture
def synthesizer():
    return EnumSynthesizer()


class TestOutputFilename:
    """Tests for output_filename."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Status", "status_enum_generated.py"),
            ("OrderStatus", "orderstatus_enum_generated.py"),
        ],
    )
    def test_output_filename(self, name, expected):
        assert output_filename(name) == expected


class TestRender:
    """Tests for the rendered module text."""

    def test_starts_with_generated_header(self, synthesizer, status_enum):
        source = synthesizer.render(status_enum, "models")

        assert source.startswith(GENERATED_HEADER + "\n")
        assert is_generated_source(source)

    def test_mentions_package(self, synthesizer, status_enum):
        source = synthesizer.render(status_enum, "app.models")

        assert '"""Status enum for the app.models package."""' in source

    def test_declares_type_and_constants(self, synthesizer, status_enum):
        source = synthesizer.render(status_enum, "models")

        assert "class StatusEnum(str, Enum):" in source
        assert "    Pending = 'pending'" in source
        assert "StatusPending = StatusEnum.Pending" in source
        assert "StatusActive = StatusEnum.Active" in source
        assert "ALL_STATUSES: List[StatusEnum] = [" in source
        assert "def is_valid_status(value: Any) -> bool:" in source
        assert "def parse_status(raw: str) -> StatusEnum:" in source
        assert "def status_to_json(value: Any) -> str:" in source
        assert "def status_from_json(" in source

    def test_output_is_valid_python(self, synthesizer, status_enum):
        ast.parse(synthesizer.render(status_enum, "models"))

    def test_render_is_deterministic(self, status_enum):
        first = EnumSynthesizer().render(status_enum, "models")
        second = EnumSynthesizer().render(status_enum, "models")

        assert first == second

    def test_values_keep_declaration_order(self, synthesizer):
        enum_def = _enum("Level", [("Zeta", "zeta"), ("Alpha", "alpha")])
        source = synthesizer.render(enum_def, "models")

        assert source.index("LevelZeta =") < source.index("LevelAlpha =")

    def test_explicit_plural(self, synthesizer):
        enum_def = _enum("Person", [("Adult", "adult")], plural="People")
        source = synthesizer.render(enum_def, "models")

        assert "ALL_PEOPLE: List[PersonEnum]" in source

    def test_multi_word_names_are_snake_cased(self, synthesizer):
        enum_def = _enum("OrderStatus", [("Open", "open")])
        source = synthesizer.render(enum_def, "orders")

        assert "ALL_ORDER_STATUSES" in source
        assert "def parse_order_status(" in source
        assert "def order_status_to_json(" in source

    def test_string_values_are_escaped(self, synthesizer):
        enum_def = _enum("Quote", [("Single", "it's")])
        namespace = _load(synthesizer.render(enum_def, "models"))

        assert namespace["QuoteSingle"].value == "it's"


class TestGeneratedModule:
    """Tests that execute the generated module."""

    def test_constants_and_collection(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        assert ns["StatusPending"] == "pending"
        assert str(ns["StatusActive"]) == "active"
        assert ns["ALL_STATUSES"] == [ns["StatusPending"], ns["StatusActive"]]
        assert ns["__all__"][0] == "StatusEnum"

    def test_is_valid(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))
        is_valid = ns["is_valid_status"]

        assert is_valid("pending")
        assert is_valid(ns["StatusActive"])
        assert not is_valid("Pending")
        assert not is_valid("")
        assert not is_valid(None)
        assert not is_valid(1)

    def test_parse(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        assert ns["parse_status"]("active") is ns["StatusActive"]

    def test_parse_invalid_names_type_and_value(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        with pytest.raises(ValueError) as exc_info:
            ns["parse_status"]("bogus")

        assert str(exc_info.value) == "invalid Status: 'bogus'"

    def test_json_round_trip(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        payload = ns["status_to_json"](ns["StatusPending"])

        assert payload == '"pending"'
        assert ns["status_from_json"](payload) is ns["StatusPending"]

    def test_invalid_value_serializes_to_null(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        assert ns["status_to_json"]("bogus") == "null"
        assert ns["status_to_json"](None) == "null"

    def test_from_json_rejects_unknown_value(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        with pytest.raises(ValueError) as exc_info:
            ns["status_from_json"]('"bogus"')

        assert "invalid Status" in str(exc_info.value)

    def test_from_json_rejects_non_string(self, synthesizer, status_enum):
        ns = _load(synthesizer.render(status_enum, "models"))

        with pytest.raises(ValueError) as exc_info:
            ns["status_from_json"]("42")

        assert "must be a JSON string" in str(exc_info.value)

    def test_title_cased_tag_values(self, synthesizer):
        enum_def = _enum(
            "Priority", [("Low", "Low"), ("Medium", "Medium"), ("High", "High")]
        )
        ns = _load(synthesizer.render(enum_def, "tasks"))

        assert ns["ALL_PRIORITIES"] == ["Low", "Medium", "High"]
        assert ns["parse_priority"]("High") is ns["PriorityHigh"]
        assert not ns["is_valid_priority"]("high")


class TestSynthesisErrors:
    """Tests for synthesis failures."""

    def test_keyword_constant_is_rejected(self, synthesizer):
        enum_def = _enum("Answer", [("Yes", "yes"), ("None", "none")])

        with pytest.raises(SynthesisError) as exc_info:
            synthesizer.render(enum_def, "models")

        assert "enum Answer is not valid Python" in str(exc_info.value)

    def test_constant_shadowing_enum_class_is_rejected(self, synthesizer):
        enum_def = _enum("Status", [("Enum", "enum"), ("Active", "active")])

        with pytest.raises(SynthesisError) as exc_info:
            synthesizer.render(enum_def, "models")

        assert "StatusEnum" in str(exc_info.value)
        assert "collides" in str(exc_info.value)

    def test_directive_value_named_enum_is_rejected(self, synthesizer):
        source_file = parse_source("# enum:name=Status values=enum,active\n")
        enum_def = AnnotationExtractor().extract([source_file])[0]

        with pytest.raises(SynthesisError):
            synthesizer.render(enum_def, "models")

    def test_generated_names(self):
        names = generated_names(_enum("OrderStatus", [("Open", "open")]))

        assert {
            "OrderStatusEnum",
            "ALL_ORDER_STATUSES",
            "is_valid_order_status",
            "parse_order_status",
            "order_status_to_json",
            "order_status_from_json",
        } <= names
        assert "OrderStatusOpen" not in names

    def test_invalid_template_syntax(self):
        with pytest.raises(SynthesisError) as exc_info:
            EnumSynthesizer(template="{% for value in %}")

        assert "Invalid enum template" in str(exc_info.value)

    def test_undefined_template_variable(self, status_enum):
        synthesizer = EnumSynthesizer(template="{{ missing_variable }}")

        with pytest.raises(SynthesisError) as exc_info:
            synthesizer.render(status_enum, "models")

        assert "missing_variable" in str(exc_info.value)
