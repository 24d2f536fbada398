from .menu import MenuCatalog
from .order import OrderStore
from .restaurant import Restaurant
from .table import TableStore

__all__ = ["MenuCatalog", "OrderStore", "Restaurant", "TableStore"]
