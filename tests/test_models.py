# tests/test_models.py
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from solar_winds_api.db import models
from solar_winds_api.exceptions import InvalidAddressOwnerError


def _address(**owner) -> models.Address:
    return models.Address(
        street="Usina Solar Sul",
        number="Setor 5",
        city="São José dos Campos",
        state="SP",
        zipcode="12000-000",
        country="Brasil",
        **owner,
    )


def test_check_address_owner_accepts_exactly_one() -> None:
    models.check_address_owner(uuid4(), None)
    models.check_address_owner(None, uuid4())


@pytest.mark.parametrize("user_uuid, sensor_uuid", [(None, None), (uuid4(), uuid4())])
def test_check_address_owner_rejects_neither_or_both(user_uuid, sensor_uuid) -> None:
    with pytest.raises(InvalidAddressOwnerError):
        models.check_address_owner(user_uuid, sensor_uuid)


def test_flush_rejects_ownerless_address(db) -> None:
    db.add(_address())

    with pytest.raises(InvalidAddressOwnerError):
        db.flush()
    db.rollback()


def test_flush_rejects_owner_change_to_both(db) -> None:
    address = _address(sensor_uuid=uuid4())
    db.add(address)
    db.commit()

    address.user_uuid = uuid4()
    with pytest.raises(InvalidAddressOwnerError):
        db.flush()
    db.rollback()


def test_timestamps_are_filled_on_insert(db) -> None:
    address = _address(user_uuid=uuid4())
    db.add(address)
    db.flush()

    assert address.uuid is not None
    assert address.created_at is not None
    assert address.updated_at is not None


def test_two_users_cannot_share_an_address(db) -> None:
    address = _address(user_uuid=uuid4())
    db.add(address)
    db.flush()

    db.add(models.User(name="Ana", last_name="Costa", document="1", address_uuid=address.uuid))
    db.add(models.User(name="Rui", last_name="Costa", document="2", address_uuid=address.uuid))

    with pytest.raises(IntegrityError):
        db.flush()
