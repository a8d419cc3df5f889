"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from toolhub.infrastructure.clients.ip_info import IpInfoClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ip_info_client() -> IpInfoClient:
    """Provide IP geolocation client instance"""
    return IpInfoClient()
