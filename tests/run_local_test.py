# run_local_test.py
import argparse
import time

from catalog.loader import load_catalog
from engine_core.config import get_config
from engine_core.logger import log_event
from recommender.errors import SimilarityError
from recommender.recommend import get_similar


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the items most similar to a catalog item.")
    parser.add_argument("item_id", type=str, help="Identifier of the query item")
    parser.add_argument("--k", type=int, default=get_config().default_top_k, help="Max results")
    parser.add_argument("--catalog", type=str, default=None, help="Path to a catalog JSON file")
    args = parser.parse_args(argv)

    catalog = load_catalog(args.catalog or get_config().catalog_path)
    start = time.time()
    try:
        similar = get_similar(catalog, args.item_id, k=args.k)
    except SimilarityError as e:
        log_event("query_failed", {"item_id": args.item_id, "error": str(e)})
        print(f"⚠️ {e}")
        return 1
    latency_ms = round((time.time() - start) * 1000, 3)
    log_event("similar_query", {"item_id": args.item_id, "k": args.k, "returned": len(similar), "latency_ms": latency_ms})

    query = catalog.get_item_by_id(args.item_id)
    print(f"\n🎬 Similar to {query.title}:")
    for result in similar:
        print(f"  {result.title}: {round(result.percent)}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
