from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.directions_routes import router as directions_router
from api.sessions_routes import router as sessions_router
from api.status import router as status_router
from config import settings
from core.logging_config import configure_logging
from core.register_providers import register_providers
from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    register_providers()
    yield


app = FastAPI(title="Route Finder Backend", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(directions_router)
app.include_router(sessions_router)
app.include_router(status_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
