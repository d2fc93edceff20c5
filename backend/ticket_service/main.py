from fastapi import FastAPI

from .routers import purchases
from .utils.request_context import request_id_middleware

app = FastAPI(title="Ticket Purchase API")
app.middleware("http")(request_id_middleware)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(purchases.router)
