import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from shared.config import settings
from shared.config.database import engine, Base
from shared.errors import register_exception_handlers
from shared.observability import setup_observability

# IMPORTANT: import models so they register with Base
from services.product_service import models as product_models
from services.order_service import models as order_models
from services.user_service import models as user_models

from services.product_service.router import router as product_router
from services.order_service.router import router as order_router, cart_router
from services.user_service.router import router as user_router

app = FastAPI(
    title="B2B Wholesale API",
    version="1.0.0",
    description="Catalog, stock-checked ordering and buyer order history for wholesale clients.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, settings.SERVICE_NAME)

register_exception_handlers(app)

app.include_router(product_router)
app.include_router(order_router)
app.include_router(cart_router)
app.include_router(user_router)


@app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "Hello World!"


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"service": settings.SERVICE_NAME, "status": "running"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
