"""Aggregates returned by the dashboard stats endpoint."""

from pydantic import Field

from inventory_client.api.schemas.base import WireModel


class DashboardStats(WireModel):
    total_products: int = 0
    total_categories: int = 0
    total_inventory_value: float = Field(0.0, description="Sum of price x stock")
    total_stock: int = 0
