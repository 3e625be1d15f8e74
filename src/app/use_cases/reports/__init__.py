"""Cross-resource reporting use cases"""
from .dashboard_stats import DashboardStats, SECTIONS

__all__ = ["DashboardStats", "SECTIONS"]
