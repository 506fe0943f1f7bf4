import json
import logging
from pathlib import Path
from typing import List, Dict, Any, Union

from .config import get_settings

logger = logging.getLogger(__name__)


class FacturasError(Exception):
    """Base error for the facturas record source"""


class FacturasNotFoundError(FacturasError):
    pass


class FacturasParseError(FacturasError):
    pass


class DatabaseClient:
    """
    File-backed store of factura records.

    The file is read and parsed again on every call; nothing is kept between
    requests.
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    def exists(self) -> bool:
        return self.file_path.is_file()

    def load_facturas(self) -> List[Dict[str, Any]]:
        """Read the whole JSON array of facturas"""
        if not self.exists():
            raise FacturasNotFoundError(f"Facturas file not found: {self.file_path}")

        try:
            raw = self.file_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            # Removed between the existence check and the read
            raise FacturasNotFoundError(f"Facturas file not found: {self.file_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FacturasParseError(f"Could not read {self.file_path}: {e}") from e

        try:
            facturas = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FacturasParseError(f"Invalid JSON in {self.file_path}: {e}") from e

        if not isinstance(facturas, list):
            raise FacturasParseError(f"Expected a JSON array in {self.file_path}, got {type(facturas).__name__}")
        for index, factura in enumerate(facturas):
            if not isinstance(factura, dict):
                raise FacturasParseError(f"Record {index} in {self.file_path} is not an object")

        logger.debug("Loaded %d facturas from %s", len(facturas), self.file_path)
        return facturas


def get_db() -> DatabaseClient:
    """FastAPI dependency: a client bound to the configured file"""
    return DatabaseClient(get_settings().facturas_file)
