"""Menu catalog endpoints."""
from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_categories_use_case, get_products_by_category_use_case
from api.responses import unwrap
from tableside.application.dtos import CategoryDTO, ProductDTO
from tableside.application.use_cases import GetAllCategoriesUseCase, GetProductsByCategoryUseCase


router = APIRouter()


@router.get("", response_model=List[CategoryDTO], summary="Active menu categories")
async def list_categories(
    use_case: GetAllCategoriesUseCase = Depends(get_categories_use_case),
):
    return unwrap(await use_case.execute())


@router.get(
    "/{category_id}/products",
    response_model=List[ProductDTO],
    summary="Available products of a category",
)
async def list_products(
    category_id: str,
    use_case: GetProductsByCategoryUseCase = Depends(get_products_by_category_use_case),
):
    return unwrap(await use_case.execute(category_id))
