from .admin import Admin
from .revenue_data import RevenueData

__all__ = [
    'Admin',
    'RevenueData'
]
