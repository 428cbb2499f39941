from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.catalog.entities.service.product import ProductStore
from src.catalog.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    product_store: ProductStore
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
