# petclinic/routers/dev.py
# Endpoint de desarrollo para crear datos de prueba
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
import logging

from ..db import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

PET_TYPES = [
    {"_id": 1, "name": "cat"},
    {"_id": 2, "name": "dog"},
    {"_id": 3, "name": "lizard"},
    {"_id": 4, "name": "snake"},
    {"_id": 5, "name": "bird"},
    {"_id": 6, "name": "hamster"},
]

OWNERS = [
    {"_id": 1, "first_name": "George", "last_name": "Franklin", "address": "110 W. Liberty St.", "city": "Madison", "telephone": "6085551023"},
    {"_id": 2, "first_name": "Betty", "last_name": "Davis", "address": "638 Cardinal Ave.", "city": "Sun Prairie", "telephone": "6085551749"},
    {"_id": 3, "first_name": "Eduardo", "last_name": "Rodriquez", "address": "2693 Commerce St.", "city": "McFarland", "telephone": "6085558763"},
    {"_id": 4, "first_name": "Harold", "last_name": "Davis", "address": "563 Friendly St.", "city": "Windsor", "telephone": "6085553198"},
    {"_id": 5, "first_name": "Peter", "last_name": "McTavish", "address": "2387 S. Fair Way", "city": "Madison", "telephone": "6085552765"},
]

@router.post("/seed-data")
async def seed_data(db: AsyncIOMotorDatabase = Depends(get_db)):
    """
    Crea los tipos de mascota y algunos dueños de prueba.
    Es idempotente: lo que ya existe no se toca.
    Solo para desarrollo.
    """
    types_created = 0
    for pet_type in PET_TYPES:
        res = await db.pet_types.update_one(
            {"_id": pet_type["_id"]}, {"$setOnInsert": {"name": pet_type["name"]}}, upsert=True
        )
        if res.upserted_id is not None:
            types_created += 1

    owners_created = 0
    for owner in OWNERS:
        res = await db.owners.update_one(
            {"_id": owner["_id"]}, {"$setOnInsert": {k: v for k, v in owner.items() if k != "_id"}}, upsert=True
        )
        if res.upserted_id is not None:
            owners_created += 1

    logger.info("Seed: %d pet types, %d owners created", types_created, owners_created)
    return {
        "message": "Datos de prueba creados",
        "pet_types_created": types_created,
        "owners_created": owners_created,
    }
