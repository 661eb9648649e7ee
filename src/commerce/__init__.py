"""Storefront commerce context: cart pricing and checkout."""
