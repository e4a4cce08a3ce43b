"""Dashboard client: table state, gateway client and display helpers."""
from .client import DashboardClient
from .state import ASC, DESC, SortConfig, TableState

__all__ = [
    'ASC',
    'DESC',
    'DashboardClient',
    'SortConfig',
    'TableState',
]
