"""Get All Categories Use Case (menu sections shown to diners)."""
from typing import List

from tableside.application.dtos import CategoryDTO
from tableside.application.mappers import CatalogMapper
from tableside.application.results import Result
from tableside.domain.repositories import CategoryRepository


class GetAllCategoriesUseCase:

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    async def execute(self) -> Result[List[CategoryDTO]]:
        categories = await self.category_repository.get_active()
        return Result.ok([CatalogMapper.category_to_dto(c) for c in categories])
