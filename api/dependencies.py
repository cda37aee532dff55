"""
FastAPI Dependencies.

Provides dependency injection for repositories, adapters and use cases.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from tableside.application.interfaces import IOrderNotificationService, IPaymentGateway
from tableside.application.use_cases import (
    AddProductToOrderUseCase,
    CancelOrderUseCase,
    ConfirmOrderUseCase,
    EndTableSessionUseCase,
    GetAllActiveOrdersUseCase,
    GetAllCategoriesUseCase,
    GetOrCreateOrderForTableUseCase,
    GetOrderUseCase,
    GetProductsByCategoryUseCase,
    ProcessPaymentUseCase,
    StartTableSessionUseCase,
    UpdateOrderStatusUseCase,
)
from tableside.domain.repositories import (
    CategoryRepository,
    OrderRepository,
    PaymentRepository,
    ProductRepository,
    TableRepository,
)
from tableside.infrastructure.adapters.notifications import (
    LoggingNotificationService,
    WebhookNotificationService,
)
from tableside.infrastructure.adapters.payments import MockPaymentGateway
from tableside.infrastructure.adapters.persistence import (
    InMemoryCategoryRepository,
    InMemoryOrderRepository,
    InMemoryPaymentRepository,
    InMemoryProductRepository,
    InMemoryTableRepository,
)
from tableside.infrastructure.database.config import get_engine, get_session_factory
from tableside.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_session_factory: Optional[async_sessionmaker] = None
_order_repository: Optional[OrderRepository] = None
_table_repository: Optional[TableRepository] = None
_payment_repository: Optional[PaymentRepository] = None
_product_repository: Optional[ProductRepository] = None
_category_repository: Optional[CategoryRepository] = None
_payment_gateway: Optional[IPaymentGateway] = None
_notification_service: Optional[IOrderNotificationService] = None


def reset_dependencies() -> None:
    """Drop every singleton (tests and settings reloads)."""
    global _session_factory, _order_repository, _table_repository
    global _payment_repository, _product_repository, _category_repository
    global _payment_gateway, _notification_service

    _session_factory = None
    _order_repository = None
    _table_repository = None
    _payment_repository = None
    _product_repository = None
    _category_repository = None
    _payment_gateway = None
    _notification_service = None


def uses_database() -> bool:
    return get_app_settings().restaurant.storage_backend == "sqlalchemy"


def get_db_session_factory() -> async_sessionmaker:
    global _session_factory
    if _session_factory is None:
        engine = get_engine(get_app_settings().database)
        _session_factory = get_session_factory(engine)
    return _session_factory


# =============================================================================
# REPOSITORIES
# =============================================================================

def get_order_repository() -> OrderRepository:
    global _order_repository
    if _order_repository is None:
        if uses_database():
            from tableside.data import SqlAlchemyOrderRepository
            _order_repository = SqlAlchemyOrderRepository(get_db_session_factory())
        else:
            _order_repository = InMemoryOrderRepository()
        logger.info(f"Created {type(_order_repository).__name__} instance")
    return _order_repository


def get_table_repository() -> TableRepository:
    global _table_repository
    if _table_repository is None:
        if uses_database():
            from tableside.data import SqlAlchemyTableRepository
            _table_repository = SqlAlchemyTableRepository(get_db_session_factory())
        else:
            _table_repository = InMemoryTableRepository()
        logger.info(f"Created {type(_table_repository).__name__} instance")
    return _table_repository


def get_payment_repository() -> PaymentRepository:
    global _payment_repository
    if _payment_repository is None:
        if uses_database():
            from tableside.data import SqlAlchemyPaymentRepository
            _payment_repository = SqlAlchemyPaymentRepository(get_db_session_factory())
        else:
            _payment_repository = InMemoryPaymentRepository()
        logger.info(f"Created {type(_payment_repository).__name__} instance")
    return _payment_repository


def get_product_repository() -> ProductRepository:
    global _product_repository
    if _product_repository is None:
        if uses_database():
            from tableside.data import SqlAlchemyProductRepository
            _product_repository = SqlAlchemyProductRepository(get_db_session_factory())
        else:
            _product_repository = InMemoryProductRepository()
    return _product_repository


def get_category_repository() -> CategoryRepository:
    global _category_repository
    if _category_repository is None:
        if uses_database():
            from tableside.data import SqlAlchemyCategoryRepository
            _category_repository = SqlAlchemyCategoryRepository(get_db_session_factory())
        else:
            _category_repository = InMemoryCategoryRepository()
    return _category_repository


# =============================================================================
# ADAPTERS
# =============================================================================

def get_payment_gateway() -> IPaymentGateway:
    global _payment_gateway
    if _payment_gateway is None:
        settings = get_app_settings().payments
        _payment_gateway = MockPaymentGateway(
            success_rate=settings.success_rate,
            min_delay_ms=settings.min_delay_ms,
            max_delay_ms=settings.max_delay_ms,
        )
    return _payment_gateway


def get_notification_service() -> IOrderNotificationService:
    global _notification_service

    if _notification_service is None:
        settings = get_app_settings().notifications

        if settings.webhook_enabled:
            _notification_service = WebhookNotificationService(settings)
            logger.info("Created WebhookNotificationService instance")
        else:
            _notification_service = LoggingNotificationService()
            logger.info("Using LoggingNotificationService (webhook disabled)")

    return _notification_service


# =============================================================================
# USE CASES
# =============================================================================

def get_start_table_session_use_case() -> StartTableSessionUseCase:
    return StartTableSessionUseCase(get_table_repository())


def get_end_table_session_use_case() -> EndTableSessionUseCase:
    return EndTableSessionUseCase(get_table_repository())


def get_or_create_order_use_case() -> GetOrCreateOrderForTableUseCase:
    return GetOrCreateOrderForTableUseCase(get_order_repository(), get_table_repository())


def get_order_use_case() -> GetOrderUseCase:
    return GetOrderUseCase(get_order_repository())


def get_add_product_use_case() -> AddProductToOrderUseCase:
    return AddProductToOrderUseCase(get_order_repository(), get_product_repository())


def get_confirm_order_use_case() -> ConfirmOrderUseCase:
    return ConfirmOrderUseCase(get_order_repository(), get_notification_service())


def get_cancel_order_use_case() -> CancelOrderUseCase:
    return CancelOrderUseCase(get_order_repository(), get_notification_service())


def get_update_order_status_use_case() -> UpdateOrderStatusUseCase:
    return UpdateOrderStatusUseCase(get_order_repository(), get_notification_service())


def get_active_orders_use_case() -> GetAllActiveOrdersUseCase:
    return GetAllActiveOrdersUseCase(get_order_repository())


def get_process_payment_use_case() -> ProcessPaymentUseCase:
    return ProcessPaymentUseCase(
        order_repository=get_order_repository(),
        payment_repository=get_payment_repository(),
        payment_gateway=get_payment_gateway(),
        gateway_timeout=get_app_settings().payments.timeout_seconds,
    )


def get_categories_use_case() -> GetAllCategoriesUseCase:
    return GetAllCategoriesUseCase(get_category_repository())


def get_products_by_category_use_case() -> GetProductsByCategoryUseCase:
    return GetProductsByCategoryUseCase(get_category_repository(), get_product_repository())
