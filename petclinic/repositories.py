"""
Acceso a datos de dueños y mascotas.

PetResource sólo conoce los protocolos; las implementaciones Mongo se
construyen por petición a partir de la base de datos de motor.
"""
from typing import Any, Dict, Iterable, List, Optional, Protocol

from motor.motor_asyncio import AsyncIOMotorDatabase

from .db import next_sequence
from .schemas.pet import Owner, Pet, PetType
from .utils import date_to_str, to_id


class PetRepository(Protocol):
    async def find_pet_types(self) -> List[PetType]: ...

    async def find_pet_type_by_id(self, type_id: int) -> Optional[PetType]: ...

    async def find_by_id(self, pet_id: int) -> Optional[Pet]: ...

    async def save(self, pet: Pet) -> Pet: ...


class OwnerRepository(Protocol):
    async def find_by_id(self, owner_id: int) -> Optional[Owner]: ...


async def _load_types(db: AsyncIOMotorDatabase, type_ids: Iterable[Any]) -> Dict[int, PetType]:
    ids = {t for t in type_ids if t is not None}
    if not ids:
        return {}
    docs = await db.pet_types.find({"_id": {"$in": list(ids)}}).to_list(None)
    return {d["_id"]: PetType(**to_id(d)) for d in docs}


def _pet_from_doc(doc: Dict[str, Any], types: Dict[int, PetType]) -> Pet:
    d = to_id(doc)
    return Pet(
        id=d["id"],
        name=d.get("name"),
        birth_date=d.get("birth_date"),
        type=types.get(d.get("type_id")),
    )


class MongoOwnerRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def find_by_id(self, owner_id: int) -> Optional[Owner]:
        doc = await self.db.owners.find_one({"_id": owner_id})
        if not doc:
            return None
        data = to_id(doc)
        data.pop("pets", None)
        owner = Owner(**data)

        # las mascotas del dueño, ordenadas por nombre
        pet_docs = await self.db.pets.find({"owner_id": owner_id}).sort("name", 1).to_list(None)
        types = await _load_types(self.db, (p.get("type_id") for p in pet_docs))
        for pet_doc in pet_docs:
            owner.add_pet(_pet_from_doc(pet_doc, types))
        return owner


class MongoPetRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.owners = MongoOwnerRepository(db)

    async def find_pet_types(self) -> List[PetType]:
        docs = await self.db.pet_types.find().sort("name", 1).to_list(None)
        return [PetType(**to_id(d)) for d in docs]

    async def find_pet_type_by_id(self, type_id: int) -> Optional[PetType]:
        doc = await self.db.pet_types.find_one({"_id": type_id})
        return PetType(**to_id(doc)) if doc else None

    async def find_by_id(self, pet_id: int) -> Optional[Pet]:
        doc = await self.db.pets.find_one({"_id": pet_id})
        if not doc:
            return None
        owner = await self.owners.find_by_id(doc.get("owner_id"))
        if owner is not None:
            for pet in owner.pets:
                if pet.id == pet_id:
                    return pet
        types = await _load_types(self.db, [doc.get("type_id")])
        return _pet_from_doc(doc, types)

    async def save(self, pet: Pet) -> Pet:
        fields = {
            "name": pet.name,
            "birth_date": date_to_str(pet.birth_date),
            "type_id": pet.type.id if pet.type is not None else None,
        }
        if pet.id is None:
            pet.id = await next_sequence(self.db, "pets")
            await self.db.pets.insert_one({"_id": pet.id, **fields, "owner_id": pet.owner_id})
        else:
            # el dueño no cambia tras la creación
            await self.db.pets.update_one({"_id": pet.id}, {"$set": fields})
        return pet
