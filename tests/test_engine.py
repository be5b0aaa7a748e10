import pytest

from docseal.core import DocumentEngine, EncryptionPolicy, FieldSelector
from docseal.core.errors import MissingSignature, NotAnObject


def test_depth_1_scenario(key_pair):
    engine = DocumentEngine(key_pair, policy=EncryptionPolicy.DEPTH_1)

    encrypted = engine.encrypt({"a": "b"})

    assert list(encrypted) == ["a"]
    assert isinstance(encrypted["a"], str) and encrypted["a"] != "b"
    assert engine.decrypt(encrypted) == {"a": "b"}


def test_selective_scenario(engine):
    engine.configure({"fieldsToEncrypt": ["secret"]})
    document = {"secret": {"x": 1}, "open": {"secret": 2}}

    encrypted = engine.encrypt(document)

    assert isinstance(encrypted["secret"], str)
    assert isinstance(encrypted["open"]["secret"], str)
    assert engine.decrypt(encrypted) == document


def test_policy_override(engine):
    with pytest.raises(NotAnObject):
        engine.encrypt(["hin", "hoi"], EncryptionPolicy.DEPTH_1)
    assert engine.encrypt(["hin", "hoi"]) == ["hin", "hoi"]


def test_sign_and_verify_scenario(engine):
    signature = engine.sign({"nice": "to meet you"})

    assert engine.verify({"data": {"nice": "to meet you"}, "signature": signature})
    assert not engine.verify({"data": {"hi": "to meet you"}, "signature": signature})


def test_verify_missing_signature_scenario(engine):
    with pytest.raises(MissingSignature):
        engine.verify({"data": "abcdefg"})


def test_engines_have_independent_selections(key_pair):
    first = DocumentEngine(key_pair, FieldSelector(["a"]))
    second = DocumentEngine(key_pair)

    second.configure({"fieldsToEncrypt": ["b"]})

    assert first.selector.fields == ("a",)
    assert first.encrypt({"b": 1}) == {"b": 1}
    assert isinstance(second.encrypt({"b": 1})["b"], str)
