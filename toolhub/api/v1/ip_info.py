"""GET /v1/ip-info - IP address geolocation lookup"""

from dataclasses import asdict
from typing import Optional
from fastapi import APIRouter, Depends, Query

from toolhub.api.v1.schemas import IpInfoResponse
from toolhub.api.dependencies import get_ip_info_client
from toolhub.infrastructure.clients.ip_info import IpInfoClient

router = APIRouter()


@router.get("/ip-info", response_model=IpInfoResponse)
async def get_ip_info(
    ip: Optional[str] = Query(None, description="IP address; omit to look up the caller"),
    ip_client: IpInfoClient = Depends(get_ip_info_client),
):
    """
    Look up country, city and network details for an IP address.

    Upstream failures come back as 200 with status="fail" and a message,
    matching the upstream API's own failure shape.
    """
    info = await ip_client.lookup(ip)
    return IpInfoResponse(**asdict(info))
