"""Tests for the chainable TextChain wrapper."""

from dataclasses import FrozenInstanceError

import pytest

from strkit import TextChain, TextCoercionError, chain


class TestChain:
    def test_trim(self):
        assert chain(' This is a tesT ').trim().value == 'This is a tesT'

    def test_slugify(self):
        assert chain(' This is a tesT ').slugify().value == 'this-is-a-test'
        assert chain(' This is a tesT ').slugify(':').value == 'this:is:a:test'

    def test_camel(self):
        assert chain(' This is a tesT ').camel().value == 'thisIsATest'

    def test_case_methods(self):
        assert chain('TEST').capitalize().value == 'Test'
        assert chain('TEST').lower().value == 'test'
        assert chain('test').upper().value == 'TEST'

    def test_identifier_methods(self):
        assert chain('hello_world').snake_to_camel().value == 'helloWorld'
        assert chain('helloWorld').snake().value == 'hello_world'
        assert chain('helloWorld').words().value == 'hello world'
        assert chain('hello_world').title().value == 'Hello World'
        assert chain('hello world').capitalize_all().value == 'Hello World'

    def test_chained_calls(self):
        assert chain('  user_name ').trim().snake_to_camel().upper().value == 'USERNAME'

    def test_scalar_methods(self):
        wrapped = chain('test')
        assert wrapped.count() == 4
        assert wrapped.length == 4
        assert len(wrapped) == 4
        assert wrapped.ends_with('st') is True
        assert wrapped.starts_with('te') is True
        assert wrapped.starts_with('st', 2) is True

    def test_coerces_on_construction(self):
        assert chain(123).value == '123'
        assert chain(123).count() == 3

    def test_none_rejected(self):
        with pytest.raises(TextCoercionError):
            chain(None)


class TestTextChainValue:
    def test_methods_return_new_chain(self):
        original = chain(' Hi ')
        trimmed = original.trim()
        assert isinstance(trimmed, TextChain)
        assert trimmed is not original
        assert original.value == ' Hi '

    def test_immutable(self):
        wrapped = chain('test')
        with pytest.raises(FrozenInstanceError):
            wrapped.value = 'other'

    def test_equality_and_str(self):
        assert chain('a') == TextChain('a')
        assert str(chain('Hello').upper()) == 'HELLO'
