"""Unit tests for short code generation."""

import string

import pytest

from short_iron.core.config import URL_SAFE_CHARS, settings
from short_iron.services.codes import CodeGenerator


def test_generate_default_length():
    code = CodeGenerator().generate()
    assert len(code) == settings.URL_CODE_LENGTH == 10


def test_generate_custom_length():
    assert len(CodeGenerator(length=4).generate()) == 4


def test_generate_only_url_safe_characters():
    generator = CodeGenerator()
    for _ in range(200):
        assert set(generator.generate()) <= set(URL_SAFE_CHARS)


def test_generate_custom_alphabet():
    generator = CodeGenerator(length=32, alphabet=string.digits)
    assert generator.generate().isdigit()


def test_generator_is_callable():
    generator = CodeGenerator(length=6)
    assert len(generator()) == 6


def test_generate_uniqueness():
    generator = CodeGenerator()
    codes = {generator.generate() for _ in range(1000)}
    # With 64^10 possibilities, 1000 codes should all be unique
    assert len(codes) == 1000


@pytest.mark.parametrize("length", [0, -3])
def test_rejects_non_positive_length(length):
    with pytest.raises(ValueError):
        CodeGenerator(length=length)


@pytest.mark.parametrize("alphabet", ["", "a", "aaaa"])
def test_rejects_degenerate_alphabet(alphabet):
    with pytest.raises(ValueError):
        CodeGenerator(alphabet=alphabet)
