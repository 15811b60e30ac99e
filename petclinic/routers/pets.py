import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Request, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..config import get_settings
from ..db import get_db
from ..errors import ResourceNotFoundError
from ..middleware.rate_limit import apply_rate_limit
from ..repositories import MongoOwnerRepository, MongoPetRepository, OwnerRepository, PetRepository
from ..schemas.pet import Pet, PetDetails, PetOut, PetRequest, PetType

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


class PetResource:
    """
    Operaciones sobre mascotas. Los repositorios se reciben en el
    constructor; el router sólo traduce HTTP <-> llamadas.
    """

    def __init__(self, pet_repository: PetRepository, owner_repository: OwnerRepository):
        self.pet_repository = pet_repository
        self.owner_repository = owner_repository

    async def get_pet_types(self) -> List[PetType]:
        return await self.pet_repository.find_pet_types()

    async def create_pet(self, owner_id: int, pet_request: PetRequest) -> Pet:
        owner = await self.owner_repository.find_by_id(owner_id)
        if owner is None:
            raise ResourceNotFoundError("Owner", owner_id)

        pet = Pet()
        owner.add_pet(pet)
        return await self._save(pet, pet_request)

    async def update_pet(self, pet_request: PetRequest) -> None:
        # el id sale del body, no de la URL
        pet = await self._find_pet_by_id(pet_request.id)
        await self._save(pet, pet_request)

    async def find_pet(self, pet_id: int) -> PetDetails:
        return PetDetails.from_pet(await self._find_pet_by_id(pet_id))

    async def _save(self, pet: Pet, pet_request: PetRequest) -> Pet:
        pet.name = pet_request.name
        pet.birth_date = pet_request.birth_date

        # un typeId desconocido deja el tipo como estaba
        pet_type = await self.pet_repository.find_pet_type_by_id(pet_request.type_id)
        if pet_type is not None:
            pet.type = pet_type

        logger.info("Saving pet %s", pet)
        return await self.pet_repository.save(pet)

    async def _find_pet_by_id(self, pet_id: int) -> Pet:
        pet = await self.pet_repository.find_by_id(pet_id)
        if pet is None:
            raise ResourceNotFoundError("Pet", pet_id)
        return pet


def get_pet_resource(db: AsyncIOMotorDatabase = Depends(get_db)) -> PetResource:
    return PetResource(MongoPetRepository(db), MongoOwnerRepository(db))


@router.get("/petTypes", response_model=list[PetType])
async def get_pet_types(resource: PetResource = Depends(get_pet_resource)):
    return await resource.get_pet_types()

@router.post("/owners/{owner_id}/pets", response_model=PetOut, status_code=status.HTTP_201_CREATED)
async def process_creation_form(
    payload: PetRequest,
    request: Request,
    owner_id: int = Path(..., ge=1),
    resource: PetResource = Depends(get_pet_resource),
):
    apply_rate_limit(request, settings.rate_limit_writes, "pets:create")
    pet = await resource.create_pet(owner_id, payload)
    return PetOut.from_pet(pet)

# /owners/*/pets/{pet_id}: ni el owner ni el pet_id de la URL se usan
@router.put("/owners/{owner_id}/pets/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def process_update_form(
    payload: PetRequest,
    request: Request,
    resource: PetResource = Depends(get_pet_resource),
):
    apply_rate_limit(request, settings.rate_limit_writes, "pets:update")
    await resource.update_pet(payload)
    return None

@router.get("/owners/{owner_id}/pets/{pet_id}", response_model=PetDetails)
async def find_pet(pet_id: int, resource: PetResource = Depends(get_pet_resource)):
    return await resource.find_pet(pet_id)
