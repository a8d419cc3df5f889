"""IP geolocation HTTP client (ip-api.com compatible)"""

import logging
import httpx
from typing import Any, Dict, Optional
from toolhub.domain.models import IpInfo
from toolhub.config import settings
from toolhub.infrastructure.observability.metrics import ip_lookup_latency_histogram, ip_lookup_failures_counter

logger = logging.getLogger(__name__)

LOOKUP_FIELDS = "status,message,query,country,countryCode,regionName,city,zip,lat,lon,timezone,isp,org,as"

CALLER_IP_LABEL = "Your IP"


def _parse_ip_info(data: Dict[str, Any], fallback_query: str) -> IpInfo:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return IpInfo(
        query=data.get("query") or fallback_query,
        status=data["status"],
        country=data.get("country"),
        country_code=data.get("countryCode"),
        region_name=data.get("regionName"),
        city=data.get("city"),
        zip=data.get("zip"),
        lat=data.get("lat"),
        lon=data.get("lon"),
        timezone=data.get("timezone"),
        isp=data.get("isp"),
        org=data.get("org"),
        asn=data.get("as"),
        message=data.get("message"),
    )


class IpInfoClient:
    """Client for the external IP geolocation API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.ip_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def lookup(self, ip_address: Optional[str] = None) -> IpInfo:
        """
        Fetch geographic and network details for an IP address.

        An empty address asks the API about the caller's own IP.

        Failures (timeout, non-2xx, network error, malformed body) are
        returned as IpInfo(status="fail", message=...) rather than raised.
        """
        address = (ip_address or "").strip()
        query = address or CALLER_IP_LABEL

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with ip_lookup_latency_histogram.time():
                    response = await client.get(
                        f"{self.base_url}/json/{address}",
                        params={"fields": LOOKUP_FIELDS},
                    )
                response.raise_for_status()
                return _parse_ip_info(response.json(), query)

            except httpx.TimeoutException:
                message = f"IP lookup timed out after {self.timeout}s"
            except httpx.HTTPStatusError as e:
                message = f"API request failed with status {e.response.status_code}: {e.response.text}"
            except httpx.RequestError as e:
                message = f"Network error contacting IP API: {e}"
            except (KeyError, ValueError, TypeError) as e:
                message = f"Invalid response from IP API: {e}"

        ip_lookup_failures_counter.inc()
        logger.warning(message, extra={"query": query})
        return IpInfo(query=query, status="fail", message=message)
