import pytest

from signup_backend.errors import ConflictError
from signup_backend.store.users import UserStore


def test_insert_returns_distinct_increasing_ids(db_session) -> None:
    store = UserStore(db_session)

    first = store.insert('Ana', 'ana@x.com', 'hash-1')
    second = store.insert('Bo', 'bo@x.com', 'hash-2')

    assert second > first


def test_insert_rejects_duplicate_email_through_unique_constraint(db_session) -> None:
    store = UserStore(db_session)
    store.insert('Ana', 'ana@x.com', 'hash-1')

    with pytest.raises(ConflictError) as exception_info:
        store.insert('Other Ana', 'ana@x.com', 'hash-2')

    assert exception_info.value.message == 'Email already registered'
    assert store.find_by_email('ana@x.com').name == 'Ana'


def test_find_by_email_is_exact_match(db_session) -> None:
    store = UserStore(db_session)
    store.insert('Ana', 'ana@x.com', 'hash-1')

    assert store.find_by_email('ana@x.com') is not None
    assert store.find_by_email('nobody@x.com') is None
    assert store.email_exists('ana@x.com') is True
    assert store.email_exists('nobody@x.com') is False


def test_find_by_id_returns_server_assigned_fields(db_session) -> None:
    store = UserStore(db_session)
    user_id = store.insert('Ana', 'ana@x.com', 'hash-1')

    user = store.find_by_id(user_id)

    assert user.email == 'ana@x.com'
    assert user.password_hash == 'hash-1'
    assert user.created_at is not None
    assert store.find_by_id(user_id + 100) is None


def test_find_by_email_treats_input_as_a_value_not_sql(db_session) -> None:
    store = UserStore(db_session)
    store.insert('Ana', 'ana@x.com', 'hash-1')

    assert store.find_by_email("' OR '1'='1") is None
