import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sarkari.api.router import router as parser_router
from sarkari.config import get_settings


settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parser_router)

@app.get("/")
async def root():
    return {"message": "Sarkari Job Parser API"}
