"""Insurance controller: CRUD, with cover-image upload on update."""

from __future__ import annotations

from uuid import UUID

from insurance_management import mappers
from insurance_management.api.schemas.insurance import InsertInsuranceDTO, InsuranceDTO, UpdateInsuranceDTO
from insurance_management.controllers.base import EntityController
from insurance_management.db.models.insurance import Insurance
from insurance_management.repositories.base import Repository
from insurance_management.storage.uploader import FilePayload, ObjectStorageUploader


class InsuranceController(EntityController[Insurance, InsuranceDTO]):
    entity_name = "insurance"

    def __init__(self, repository: Repository[Insurance], uploader: ObjectStorageUploader) -> None:
        super().__init__(repository)
        self.uploader = uploader

    def to_dto(self, entity: Insurance) -> InsuranceDTO:
        return mappers.insurance_to_dto(entity)

    def from_insert(self, dto: InsertInsuranceDTO) -> Insurance:
        return mappers.insurance_from_insert(dto)

    def apply_update(self, entity: Insurance, dto: UpdateInsuranceDTO) -> Insurance:
        return mappers.apply_insurance_update(entity, dto)

    async def update(
        self,
        entity_id: UUID,
        dto: UpdateInsuranceDTO,
        image: FilePayload | None = None,
    ) -> InsuranceDTO:
        """
        Partial update.  When ``image`` is given it is uploaded first and the
        returned URL replaces the stored one; a failed upload (StorageError)
        aborts the update before anything is changed.
        """
        insurance = await self._get_or_raise(entity_id)

        image_url = None
        if image is not None:
            image_url = await self.uploader.upload(image)

        self.apply_update(insurance, dto)
        if image_url is not None:
            insurance.image = image_url

        updated = await self.repository.update(insurance)
        self.logger.info(
            "insurance updated",
            entity_id=str(entity_id),
            fields=sorted(dto.model_fields_set),
            image_replaced=image_url is not None,
        )
        return self.to_dto(updated)
