from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./apidoc.db"

    # Example extraction behaviour
    APIDOC_USE_TRANSACTIONS: bool = False  # persist factory samples, then roll back
    APIDOC_VERBOSE: bool = False


@dataclass(frozen=True)
class ExtractionProfile:
    """
    Options passed explicitly to the extraction components.
    Built once at process start.
    """
    use_transactions: bool = False
    verbose: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> 'ExtractionProfile':
        settings = settings or Settings()
        return cls(
            use_transactions=settings.APIDOC_USE_TRANSACTIONS,
            verbose=settings.APIDOC_VERBOSE
        )
