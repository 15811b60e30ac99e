"""
Configuración de pytest para tests
"""
from datetime import date
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from petclinic.routers.pets import PetResource, get_pet_resource
from petclinic.schemas.pet import Owner, Pet, PetType


class InMemoryStore:
    """Estado compartido por los repositorios en memoria."""

    def __init__(self):
        self.pet_types: List[PetType] = []
        self.owners: Dict[int, Owner] = {}
        self.pets: Dict[int, Pet] = {}
        self.saved: List[Pet] = []
        self._next_id = 100


class InMemoryPetRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_pet_types(self) -> List[PetType]:
        return list(self.store.pet_types)

    async def find_pet_type_by_id(self, type_id: int) -> Optional[PetType]:
        return next((t for t in self.store.pet_types if t.id == type_id), None)

    async def find_by_id(self, pet_id: int) -> Optional[Pet]:
        return self.store.pets.get(pet_id)

    async def save(self, pet: Pet) -> Pet:
        if pet.id is None:
            pet.id = self.store._next_id
            self.store._next_id += 1
        self.store.pets[pet.id] = pet
        self.store.saved.append(pet)
        return pet


class InMemoryOwnerRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_by_id(self, owner_id: int) -> Optional[Owner]:
        return self.store.owners.get(owner_id)


@pytest.fixture
def store():
    """Tres tipos de mascota y el dueño 5 con una mascota (id 7)"""
    s = InMemoryStore()
    s.pet_types = [PetType(id=1, name="cat"), PetType(id=2, name="dog"), PetType(id=3, name="lizard")]
    owner = Owner(id=5, first_name="Peter", last_name="McTavish", address="2387 S. Fair Way", city="Madison")
    s.owners[owner.id] = owner
    pet = Pet(id=7, name="George", birth_date=date(2010, 1, 20), type=s.pet_types[1])
    owner.add_pet(pet)
    s.pets[pet.id] = pet
    return s

@pytest.fixture
def resource(store):
    return PetResource(InMemoryPetRepository(store), InMemoryOwnerRepository(store))

@pytest.fixture
def app(resource):
    """La app con los repositorios en memoria y sin rate limiting"""
    from petclinic.main import app
    app.state.limiter = None
    app.dependency_overrides[get_pet_resource] = lambda: resource
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
def client(app):
    """Fixture para cliente de test de FastAPI"""
    return TestClient(app)

@pytest.fixture
def leo_request():
    return {"name": "Leo", "birthDate": "2020-01-01", "typeId": 1}
