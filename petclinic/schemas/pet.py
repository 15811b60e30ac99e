from datetime import date
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    # JSON en camelCase (birthDate, typeId...), atributos en snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class PetType(CamelModel):
    id: int
    name: str

class Pet(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    birth_date: Optional[date] = None
    type: Optional[PetType] = None
    # back-reference al dueño; no se serializa (ver PetOut.owner_id)
    owner: Optional["Owner"] = Field(default=None, exclude=True, repr=False)

    @property
    def owner_id(self) -> Optional[int]:
        return self.owner.id if self.owner is not None else None

class Owner(CamelModel):
    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    pets: List[Pet] = Field(default_factory=list)

    def add_pet(self, pet: Pet) -> None:
        self.pets.append(pet)
        pet.owner = self

Pet.model_rebuild()

class PetRequest(CamelModel):
    id: int = 0
    name: str = Field(..., min_length=1)
    birth_date: Optional[date] = None
    type_id: int = 0

class PetOut(CamelModel):
    id: int
    name: Optional[str] = None
    birth_date: Optional[date] = None
    type: Optional[PetType] = None
    owner_id: Optional[int] = None

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetOut":
        return cls(
            id=pet.id,
            name=pet.name,
            birth_date=pet.birth_date,
            type=pet.type,
            owner_id=pet.owner_id,
        )

class PetDetails(CamelModel):
    id: int
    name: Optional[str] = None
    owner: str
    birth_date: Optional[date] = None
    type: Optional[PetType] = None

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetDetails":
        owner = pet.owner
        owner_name = f"{owner.first_name} {owner.last_name}" if owner is not None else ""
        return cls(
            id=pet.id,
            name=pet.name,
            owner=owner_name,
            birth_date=pet.birth_date,
            type=pet.type,
        )
