import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from . import config
from .logger import get_logger
from .routers import players, ryder_cup, scoring

log = get_logger("golftour.main")

app = FastAPI(title=config.APP_TITLE)

app.include_router(scoring.router)
app.include_router(ryder_cup.router)
app.include_router(players.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    # solo trazamos la API; /docs y /health no interesan
    if request.url.path.startswith("/api"):
        log.info("%s %s -> %d", request.method, request.url.path, response.status_code)
    return response


# ---------------------------------------------------------------------------------

@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/docs")


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    log.info("serving %s on %s:%d", config.APP_TITLE, config.HOST, config.PORT)
    uvicorn.run("golftour.main:app", host=config.HOST, port=config.PORT)
