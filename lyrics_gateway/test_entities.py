"""Tests for the ordered entity decoding pipeline."""

import pytest

from lyrics_gateway.entities import DECODE_STEPS, decode_entities


def test_decimal_reference():
    assert decode_entities("&#65;") == "A"
    assert decode_entities("caf&#233; &#8217;n") == "café ’n"


def test_leading_zeros_are_ignored():
    assert decode_entities("&#0065;") == "A"
    assert decode_entities("&#" + "0" * 5000 + "65;") == "A"
    assert decode_entities("&#000;") == "\x00"


def test_amp_is_not_decoded_twice():
    assert decode_entities("&amp;lt;") == "&lt;"
    assert decode_entities("&amp;gt;&amp;quot;") == "&gt;&quot;"
    assert decode_entities("&#38;lt;") == "&lt;"


def test_named_entities():
    assert decode_entities("&quot;hi&quot; &lt;b&gt; rock &amp; roll") == '"hi" <b> rock & roll'
    assert decode_entities("don&apos;t won&#x27;t") == "don't won't"


def test_hex_references_other_than_apostrophe_are_kept():
    assert decode_entities("&#x41;&#x27;") == "&#x41;'"


@pytest.mark.parametrize("ref", [
    "&#55357;", "&#1114112;", "&#99999999999;", "&#" + "9" * 5000 + ";", "&#" + "0" * 5000 + "1114112;",
])
def test_invalid_code_points_are_kept(ref):
    assert decode_entities(ref) == ref


def test_entity_free_text_is_stable():
    for s in ("", "plain words\nsecond line", "ampersand & alone", "&#;", "&amp"):
        once = decode_entities(s)
        assert decode_entities(once) == once


def test_named_steps_run_in_fixed_order():
    literals = [p.pattern.replace("\\", "") for p, _ in DECODE_STEPS[1:]]
    assert literals == ["&quot;", "&amp;", "&lt;", "&gt;", "&apos;", "&#x27;"]
