"""Get Products By Category Use Case."""
import logging
from typing import List

from tableside.application.dtos import ProductDTO
from tableside.application.mappers import CatalogMapper
from tableside.application.results import Result
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import CategoryRepository, ProductRepository
from tableside.domain.value_objects import CategoryId


logger = logging.getLogger(__name__)


class GetProductsByCategoryUseCase:
    """List the orderable products of an active category."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        product_repository: ProductRepository,
    ):
        self.category_repository = category_repository
        self.product_repository = product_repository

    async def execute(self, category_id: str) -> Result[List[ProductDTO]]:
        """
        Args:
            category_id: Menu category

        Returns:
            Result with the available products of the category
        """
        try:
            category = await self.category_repository.get_by_id(
                CategoryId.from_string(category_id)
            )
        except DomainError as e:
            return Result.fail(e.message)

        if category is None:
            return Result.fail(f"Category with ID {category_id} does not exist.")

        if not category.is_active:
            logger.warning(f"Category {category.name} is not active")
            return Result.fail(f"Category '{category.name}' is not active.")

        products = await self.product_repository.get_by_category(category.id)
        return Result.ok(
            [CatalogMapper.product_to_dto(p) for p in products if p.is_available]
        )
