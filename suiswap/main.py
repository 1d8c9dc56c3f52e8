import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from suiswap.aggregator.navi import navi_aggregator
from suiswap.chain.sui import sui_client

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await navi_aggregator.initialize()
    await sui_client.initialize()
    yield
    await navi_aggregator.close()
    await sui_client.close()


app = FastAPI(
    title="Sui Swap API",
    description="Token swap quotes from the NAVI aggregator and unsigned Sui transaction plans that execute them.",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from suiswap.routes import swap, tokens  # noqa: E402

app.include_router(swap.router, prefix="/v1", tags=["Swap"])
app.include_router(tokens.router, prefix="/v1", tags=["Tokens"])


@app.get("/health")
async def health():
    return {"status": "ok"}
