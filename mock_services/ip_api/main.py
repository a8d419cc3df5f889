from fastapi import FastAPI
from fastapi.responses import JSONResponse

app = FastAPI(title="Mock IP API Server", version="1.0.0")

# Canned ip-api.com responses keyed by address; "" stands for the caller's IP
LOOKUPS = {
    "8.8.8.8": {
        "status": "success", "query": "8.8.8.8", "country": "United States", "countryCode": "US",
        "regionName": "Virginia", "city": "Ashburn", "zip": "20149", "lat": 39.03, "lon": -77.5,
        "timezone": "America/New_York", "isp": "Google LLC", "org": "Google Public DNS",
        "as": "AS15169 Google LLC",
    },
    "": {
        "status": "success", "query": "203.0.113.7", "country": "Australia", "countryCode": "AU",
        "regionName": "Queensland", "city": "Brisbane", "timezone": "Australia/Brisbane",
    },
}

# Addresses that make the stub behave like an unavailable upstream
UNAVAILABLE = {"192.0.2.1"}

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/json/")
def lookup_caller(fields: str = ""):
    return JSONResponse(content=LOOKUPS[""])

@app.get("/json/{ip}")
def lookup(ip: str, fields: str = ""):
    if ip in UNAVAILABLE:
        return JSONResponse(status_code=503, content={"detail": "upstream unavailable"})
    return JSONResponse(content=LOOKUPS.get(ip, {"status": "fail", "message": "invalid query", "query": ip}))
