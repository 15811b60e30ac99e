"""
Tests de PetResource sin pasar por HTTP
"""
from datetime import date

import pytest

from petclinic.errors import ResourceNotFoundError
from petclinic.schemas.pet import PetRequest


@pytest.mark.asyncio
async def test_get_pet_types_returns_store_order(resource, store):
    types = await resource.get_pet_types()
    assert [t.name for t in types] == ["cat", "dog", "lizard"]

@pytest.mark.asyncio
async def test_get_pet_types_empty(resource, store):
    store.pet_types = []
    assert await resource.get_pet_types() == []

@pytest.mark.asyncio
async def test_create_pet_attaches_owner_and_generates_id(resource, store):
    req = PetRequest(id=7, name="Leo", birth_date=date(2020, 1, 1), type_id=1)
    pet = await resource.create_pet(5, req)

    assert pet.id == 100
    assert pet.id != req.id
    assert pet.owner_id == 5
    assert pet.name == "Leo"
    assert pet.birth_date == date(2020, 1, 1)
    assert pet.type.name == "cat"
    assert any(p is pet for p in store.owners[5].pets)
    assert store.pets[100] is pet

@pytest.mark.asyncio
async def test_create_pet_unknown_owner_persists_nothing(resource, store):
    with pytest.raises(ResourceNotFoundError) as exc:
        await resource.create_pet(999, PetRequest(name="Leo", type_id=1))
    assert str(exc.value) == "Owner 999 not found"
    assert exc.value.entity == "Owner"
    assert exc.value.entity_id == 999
    assert store.saved == []

@pytest.mark.asyncio
async def test_update_pet_overwrites_fields_only(resource, store):
    await resource.update_pet(PetRequest(id=7, name="Basil", birth_date=date(2012, 8, 6), type_id=3))

    pet = store.pets[7]
    assert pet.id == 7
    assert pet.owner_id == 5
    assert pet.name == "Basil"
    assert pet.birth_date == date(2012, 8, 6)
    assert pet.type.name == "lizard"
    assert len(store.saved) == 1

@pytest.mark.asyncio
async def test_update_pet_unknown_type_keeps_previous_type(resource, store):
    # typeId desconocido: se ignora sin error
    await resource.update_pet(PetRequest(id=7, name="George", type_id=42))
    assert store.pets[7].type.name == "dog"

@pytest.mark.asyncio
async def test_update_unknown_pet(resource, store):
    with pytest.raises(ResourceNotFoundError, match="Pet 123 not found"):
        await resource.update_pet(PetRequest(id=123, name="Ghost"))
    assert store.saved == []

@pytest.mark.asyncio
async def test_find_pet_details(resource):
    details = await resource.find_pet(7)
    assert details.id == 7
    assert details.name == "George"
    assert details.owner == "Peter McTavish"
    assert details.birth_date == date(2010, 1, 20)
    assert details.type.name == "dog"

@pytest.mark.asyncio
async def test_find_unknown_pet(resource):
    with pytest.raises(ResourceNotFoundError, match="Pet 8 not found"):
        await resource.find_pet(8)
