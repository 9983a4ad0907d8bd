#!/usr/bin/env python3
"""
Seed script: bulk-indexes sample products into the product index for local development.
Uses dynamic mapping, so brand gets a brand.keyword sub-field for exact brand search.
Without the IK analysis plugin, set SEARCH_ANALYZER= (empty) so keyword search uses the field analyzer.
  python scripts/seed_products.py
  python scripts/seed_products.py --count 500 --reset-index
"""

import argparse
import random
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from elasticsearch import helpers

from eshop_search.config import get_settings
from eshop_search.search.elasticsearch_client import sync_es_client

# (category id, category name, product names)
CATEGORIES = [
    ("c01", "手机", ["华为 Mate 60 手机", "小米 14 手机", "Redmi Note 13", "iPhone 15", "phone stand"]),
    ("c02", "服装", ["纯棉T恤", "衬衫 shirt 商务", "牛仔裤", "运动外套", "polo shirt"]),
    ("c03", "家电", ["空气炸锅", "电饭煲", "扫地机器人", "Coffee maker", "Electric kettle"]),
    ("c04", "数码配件", ["蓝牙耳机", "充电宝", "USB-C 数据线", "机械键盘", "无线鼠标"]),
]

BRANDS = ["Huawei", "Xiaomi", "Apple", "Acme", "优衣库", "美的", "Anker", "Logitech"]

DESCRIPTIONS = [
    "正品保障，全国联保。",
    "轻薄便携，续航持久。",
    "High quality build and reliable performance.",
    "热销爆款，好评如潮。",
    "Great for home office and everyday use.",
]


def random_price() -> float | None:
    # A few products without price, to exercise the price-range filter
    if random.random() < 0.05:
        return None
    return random.choice([9.9, 15.0, 29.9, 59.0, 99.0, 199.0, 499.0, 1999.0, 5999.0])


def random_product(n: int) -> dict:
    category_id, category_name, names = random.choice(CATEGORIES)
    return {
        "productId": f"P{n:06d}",
        "productName": random.choice(names),
        "price": random_price(),
        "categoryId": category_id,
        "categoryName": category_name,
        "brand": random.choice(BRANDS),
        "sales": random.randint(0, 5000),
        "stock": random.randint(0, 300),
        "description": random.choice(DESCRIPTIONS),
    }


def main():
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Bulk-index sample products into Elasticsearch")
    ap.add_argument("--count", type=int, default=200, help="Number of products to index")
    ap.add_argument("--index", default=settings.products_index, help="Target index name")
    ap.add_argument("--reset-index", action="store_true", help="Delete the index first")
    args = ap.parse_args()

    es = sync_es_client()
    if args.reset_index and es.indices.exists(index=args.index):
        es.indices.delete(index=args.index)
        print(f"Deleted index '{args.index}'.")

    actions = (
        {"_index": args.index, "_id": doc["productId"], "_source": doc}
        for doc in (random_product(i + 1) for i in range(args.count))
    )
    ok, errors = helpers.bulk(es, actions, refresh="wait_for", raise_on_error=False)
    print(f"Indexed {ok} products into '{args.index}'.")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        sys.exit(1)
    print("Try: curl -s 'http://localhost:8000/api/v1/search/keyword?keyword=phone'")


if __name__ == "__main__":
    main()
