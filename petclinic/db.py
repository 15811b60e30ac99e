from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ReturnDocument
from .config import get_settings

_settings = get_settings()
_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None

async def get_db() -> AsyncIOMotorDatabase:
    global _client, _db
    if _db is None:
        _client = AsyncIOMotorClient(_settings.mongodb_uri)
        _db = _client[_settings.db_name]
        # Índices necesarios
        await _db.pets.create_index([("owner_id", 1), ("name", 1)])
        await _db.pet_types.create_index("name", unique=True)
        await _db.owners.create_index([("last_name", 1)])
    return _db

async def next_sequence(db: AsyncIOMotorDatabase, name: str) -> int:
    """
    Devuelve el siguiente id entero de la colección `name`.
    El contador vive en `counters` y se incrementa de forma atómica.
    """
    doc = await db.counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(doc["seq"])
