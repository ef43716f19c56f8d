from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from app.config import settings
from app.cart import RunInput
from app.function import run
from app.logging_config import setup_logging
from app.metrics import REQUESTS, ERRORS, LATENCY, DISCOUNTS
import time

setup_logging()
app = FastAPI(title=settings.service_name)

@app.get("/health")
def health():
    return {"status":"ok"}

@app.post("/run")
def run_function(payload: RunInput):
    t0 = time.time()
    status = "200"
    try:
        result = run(payload.cart)
        DISCOUNTS.inc(len(result.discounts))
        return result.model_dump(mode="json", by_alias=True)
    except Exception:
        status = "500"
        ERRORS.inc()
        raise
    finally:
        LATENCY.observe(time.time() - t0)
        REQUESTS.labels("/run","POST",status).inc()

@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
