import logging

import httpx

logger = logging.getLogger(__name__)

# Base URL for Open-Meteo
OPEN_METEO_BASE = "https://api.open-meteo.com/v1/forecast"

# Jakarta
LATITUDE = -6.2
LONGITUDE = 106.8


async def make_open_meteo_request(params: dict | None = None) -> dict:
    """Make a single GET request against the Open-Meteo forecast endpoint.

    Returns the decoded JSON body. HTTP and transport errors are raised to the
    caller as ``httpx.HTTPError`` subclasses.
    """
    query = {
        "latitude": LATITUDE,
        "longitude": LONGITUDE,
        "timezone": "auto",
    }

    if params:
        query.update(params)

    logger.debug("GET %s params=%s", OPEN_METEO_BASE, query)
    async with httpx.AsyncClient() as client:
        resp = await client.get(OPEN_METEO_BASE, params=query)
        resp.raise_for_status()
        data = resp.json()

    if not isinstance(data, dict):
        logger.debug("Ignoring non-object JSON body of type %s", type(data).__name__)
        return {}
    return data
