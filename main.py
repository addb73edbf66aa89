import traceback

from fastapi import FastAPI, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

import models  # noqa: F401  registra todas las tablas en Base.metadata
from database import Base, engine, get_db
from routes import (
    users,
    admin,
    destinations,
    activities,
    trips,
    itinerary,
    files,
)
from utils.logger import setup_api_logger

Base.metadata.create_all(bind=engine)

app = FastAPI(title="NomadIQ API (Users, Destinations, Activities, Trips, Itineraries, Uploads)")

# setup file logger for API failures
api_logger = setup_api_logger()


@app.exception_handler(Exception)
async def generic_exception_handler(request, exc):
    # log request info and stacktrace
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    api_logger.error("Unhandled exception on %s %s | error=%s\n%s",
                     request.method, request.url.path, str(exc), tb)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    api_logger.warning("HTTPException on %s %s | status=%s | detail=%s",
                       request.method, request.url.path, exc.status_code, str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


@app.get("/")
def root():
    return {"message": "NomadIQ API activa"}


@app.get("/db/ping")
def db_ping(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ok"}


app.include_router(users.router)
app.include_router(admin.router)
app.include_router(destinations.router)
app.include_router(activities.router)
app.include_router(trips.router)
app.include_router(itinerary.router)
app.include_router(files.router)
