import base64

from salescript_client.credentials import Credentials, MemoryCredentialStore, authorization_header


def test_authorization_header_format() -> None:
    expected = "user " + base64.b64encode(b"k:s").decode("ascii")
    assert authorization_header(Credentials(key="k", secret="s")) == expected


def test_authorization_header_encodes_utf8() -> None:
    header = authorization_header(Credentials(key="ключ", secret="s"))
    scheme, token = header.split(" ", 1)
    assert scheme == "user"
    assert base64.b64decode(token).decode("utf-8") == "ключ:s"


def test_from_mapping_requires_key_and_secret() -> None:
    assert Credentials.from_mapping({"key": "k", "secret": "s"}) == Credentials("k", "s")
    assert Credentials.from_mapping({"key": "k"}) is None
    assert Credentials.from_mapping({"key": 1, "secret": "s"}) is None
    assert Credentials.from_mapping(["k", "s"]) is None


def test_memory_store_replaces_value_wholesale() -> None:
    store = MemoryCredentialStore()
    assert store.get() is None
    store.set(Credentials("a", "b"))
    store.set(Credentials("c", "d"))
    assert store.get() == Credentials("c", "d")
    store.set(None)
    assert store.get() is None
