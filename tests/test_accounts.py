import pytest

from autoresponder_core.accounts import InMemoryAccountStore


def test_save_and_get_account():
    store = InMemoryAccountStore()
    store.save_account("main", {"api_key": "k"})

    assert store.get_account_data("main") == {"api_key": "k"}
    assert store.get_account_data("other") is None
    assert store.list_accounts() == ["main"]


def test_returned_data_is_a_copy():
    store = InMemoryAccountStore({"main": {"api_key": "k"}})
    data = store.get_account_data("main")
    data["api_key"] = "changed"

    assert store.get_account_data("main") == {"api_key": "k"}


def test_account_name_required():
    with pytest.raises(ValueError):
        InMemoryAccountStore().save_account(" ", {"api_key": "k"})
