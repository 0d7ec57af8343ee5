from inventory_client.api.schemas.auth import LoginRequest, LoginResponse
from inventory_client.api.schemas.category import CategoryRead
from inventory_client.api.schemas.dashboard import DashboardStats
from inventory_client.api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from inventory_client.api.schemas.seller import SellerCreate, SellerRead, SellerUpdate

__all__ = [
    "CategoryRead",
    "DashboardStats",
    "LoginRequest",
    "LoginResponse",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "SellerCreate",
    "SellerRead",
    "SellerUpdate",
]
