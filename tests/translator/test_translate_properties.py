# topmark:header:start
#
#   project      : elm-enums
#   file         : test_translate_properties.py
#   file_relpath : tests/translator/test_translate_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based tests for the bundled translator.

Run with a larger budget via ``nox -s property_test``.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from elm_enums.translator import ElmTranslator, TranslationFailure, TranslationSuccess
from elm_enums.translator.codegen import elm_string, lower_first
from elm_enums.translator.parser import parse_definitions
from tests.conftest import mark_property
from tests.strategies_enums import DrawnDocument, enum_documents


@mark_property
@given(doc=enum_documents())
def test_parse_recovers_drawn_declarations(doc: DrawnDocument) -> None:
    """Parsing yields exactly the declared types, constructors and wire values."""
    defs = parse_definitions(doc.source)

    assert tuple(
        (d.name, tuple((v.name, v.wire_value) for v in d.variants)) for d in defs
    ) == doc.types


@mark_property
@given(doc=enum_documents())
def test_translation_is_deterministic_and_complete(doc: DrawnDocument) -> None:
    """Same input, same output; every type and constructor shows up."""
    translator = ElmTranslator()
    first = translator.translate(doc.source)
    second = translator.translate(doc.source)

    assert isinstance(first, TranslationSuccess)
    assert first == second

    text = first.generated
    assert text.endswith("\n") and not text.endswith("\n\n")
    for type_name, variants in doc.types:
        assert f"\ntype {type_name}\n" in text
        assert f"\nall{type_name} : List {type_name}\n" in text
        assert f"\n{lower_first(type_name)}Decoder : Decode.Decoder {type_name}\n" in text
        assert f"\nencode{type_name} : {type_name} -> Encode.Value\n" in text
        for ctor_name, wire in variants:
            assert f"        {elm_string(wire)} ->\n            Just {ctor_name}\n" in text


@mark_property
@given(doc=enum_documents(max_types=2), junk=st.sampled_from([";", "#", "%", "1"]))
def test_trailing_junk_is_a_failure(doc: DrawnDocument, junk: str) -> None:
    """Appending a stray character never yields a success."""
    result = ElmTranslator().translate(doc.source + junk)

    assert isinstance(result, TranslationFailure)
    assert result.error.startswith("line ")
