"""
api/main.py
-----------
Item Similarity - REST API Layer
--------------------------------
Loads the catalog once at startup and serves top-k similar items
for a query item over HTTP.
"""

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel
from typing import List, Optional, Union
from contextlib import asynccontextmanager
import time
import traceback

from catalog.loader import load_catalog
from catalog.store import Catalog
from engine_core.config import get_config
from engine_core.logger import log_event
from recommender.errors import ItemNotFoundError, LengthMismatchError
from recommender.recommend import get_similar

# ─────────────────────────────────────────────────────────────────────────────
# ⚙️ 1. Global State
# ─────────────────────────────────────────────────────────────────────────────

# Global reference
catalog: Optional[Catalog] = None

# ─────────────────────────────────────────────────────────────────────────────
# 🔁 2. Lifespan Context
# ─────────────────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup/shutdown lifecycle for FastAPI.
    The catalog is read once and stays immutable while the app runs.
    """
    global catalog
    catalog = load_catalog(get_config().catalog_path)
    log_event("catalog_loaded", {
        "path": str(get_config().catalog_path),
        "items": len(catalog),
        "keys": len(catalog.keys),
    })
    print(f"🚀 Similarity API loaded {len(catalog)} items from {get_config().catalog_path}")
    yield
    print("🧩 Similarity API shutting down...")
    catalog = None

# ─────────────────────────────────────────────────────────────────────────────
# ⚙️ 3. Global App Instance (with lifespan)
# ─────────────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Item Similarity API",
    version="0.1.0",
    description="Cosine-similarity ranking over catalog rating vectors.",
    lifespan=lifespan,
)

# ─────────────────────────────────────────────────────────────────────────────
# 📥 4. Response Schemas
# ─────────────────────────────────────────────────────────────────────────────

class SimilarItem(BaseModel):
    item_id: Union[int, str]
    title: str
    similarity: float
    percent: int

class SimilarResponse(BaseModel):
    query_id: Union[int, str]
    k: int
    results: List[SimilarItem]

def _require_catalog() -> Catalog:
    if catalog is None:
        raise HTTPException(status_code=503, detail="Catalog not loaded.")
    return catalog

# ─────────────────────────────────────────────────────────────────────────────
# 🔍 5. Main Endpoint: /items/{item_id}/similar
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/items/{item_id}/similar", response_model=SimilarResponse)
def similar_endpoint(item_id: str, k: Optional[int] = Query(None, ge=0, description="Max results")):
    """
    Top-k most similar items to `item_id`, best first.
    """
    cat = _require_catalog()
    k = get_config().default_top_k if k is None else k
    if k > get_config().max_top_k:
        raise HTTPException(status_code=400, detail=f"k must be <= {get_config().max_top_k}")

    start = time.time()
    try:
        query_item = cat.get_item_by_id(item_id)
        results = get_similar(cat, item_id, k=k)
    except ItemNotFoundError as e:
        log_event("query_failed", {"item_id": item_id, "error": str(e)})
        raise HTTPException(status_code=404, detail=str(e))
    except LengthMismatchError as e:
        log_event("query_failed", {"item_id": item_id, "error": str(e)})
        raise HTTPException(status_code=422, detail=f"Malformed catalog data: {e}")
    except Exception as e:
        print("⚠️ Internal Error:", traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")

    latency_ms = round((time.time() - start) * 1000, 3)
    log_event("similar_query", {"item_id": item_id, "k": k, "returned": len(results), "latency_ms": latency_ms})

    return SimilarResponse(
        query_id=query_item.id,
        k=k,
        results=[
            SimilarItem(
                item_id=r.item_id,
                title=r.title,
                similarity=r.similarity,
                percent=round(r.percent),
            )
            for r in results
        ],
    )

# ─────────────────────────────────────────────────────────────────────────────
# 📚 6. Catalog Endpoints
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/items")
def list_items(limit: Optional[int] = Query(None, ge=0)):
    cat = _require_catalog()
    return [item.model_dump() for item in cat.list_all_items(limit)]

@app.get("/items/{item_id}")
def get_item(item_id: str):
    item = _require_catalog().get_item_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=str(ItemNotFoundError(item_id)))
    return item.model_dump()

@app.get("/keys")
def list_keys():
    return [key.model_dump() for key in _require_catalog().keys]

# ─────────────────────────────────────────────────────────────────────────────
# 🩺 7. Health & Config Endpoints
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/health")
def health_check():
    return {"status": "healthy" if catalog is not None else "loading", "items": len(catalog or ())}

@app.get("/config")
def get_current_config():
    return get_config().model_dump(mode="json")

@app.get("/")
def root():
    return {
        "message": "Item Similarity API running.",
        "catalog": str(get_config().catalog_path),
        "endpoints": ["/items", "/items/{item_id}", "/items/{item_id}/similar", "/keys", "/health", "/config"],
    }
