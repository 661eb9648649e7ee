"""Storefront management CLI.

Creates and drops the commerce database schema and seeds catalogue products.

Usage:
    python src/manage.py setup-db
    python src/manage.py drop-db
    python src/manage.py add-product TSHIRT-001 "Logo T-Shirt" --price 19.99 USD --price 17.50 EUR
"""

import argparse
import sys


def _commerce():
    from commerce.domain import commerce

    print("Initializing commerce domain...")
    commerce.init()
    return commerce


def setup_database():
    from commerce.utils.db import setup_db

    domain = _commerce()
    print("Creating commerce database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from commerce.utils.db import drop_db

    domain = _commerce()
    print("Dropping commerce database schema...")
    drop_db(domain)
    print("Done.")


def add_product(sku, title, prices, slug=None):
    """Store a product with its price list, replacing an existing one with the same SKU."""
    from commerce.catalog.product import Product
    from protean.exceptions import ObjectNotFoundError

    domain = _commerce()
    with domain.domain_context():
        repo = domain.repository_for(Product)
        try:
            product = repo.get(sku)
            product.title = title
            product.slug = slug
            product.clear_prices()
        except ObjectNotFoundError:
            product = Product.create(sku=sku, title=title, slug=slug)

        for value, currency in prices or []:
            product.add_price(float(value), currency.upper())
        repo.add(product)

    print(f"  {sku} stored with {len(prices or [])} price(s).")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    product_parser = subparsers.add_parser("add-product", help="Add or replace a catalogue product")
    product_parser.add_argument("sku")
    product_parser.add_argument("title")
    product_parser.add_argument("--slug")
    product_parser.add_argument(
        "--price",
        nargs=2,
        action="append",
        metavar=("VALUE", "CURRENCY"),
        help="Candidate price, in offer order (repeatable)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "add-product":
        add_product(args.sku, args.title, args.price, slug=args.slug)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
