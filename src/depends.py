from decimal import Decimal
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.app.repositories.counter_repository import CounterRepository
from src.app.services.logo_storage import LogoStorage
from src.app.services.pdf_service import PdfService
from src.adapter.repositories.counter_repository import (
    SqlAlchemyCounterRepository,
    InMemoryCounterRepository,
)
from src.adapter.services.logo_storage import LocalLogoStorage
from src.adapter.services.pdf_service import ReportLabPdfService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Process-wide counters for COUNTER_BACKEND=memory
_memory_counters = InMemoryCounterRepository()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def build_counter_repository(session: AsyncSession) -> CounterRepository:
    if ApplicationConfig.COUNTER_BACKEND == "memory":
        return _memory_counters
    return SqlAlchemyCounterRepository(session)


def get_default_tax_rate() -> Decimal:
    return Decimal(str(ApplicationConfig.DEFAULT_TAX_RATE))


def get_pdf_service() -> PdfService:
    return ReportLabPdfService()


def get_logo_storage() -> LogoStorage:
    return LocalLogoStorage(ApplicationConfig.LOGO_STORAGE_DIR)
