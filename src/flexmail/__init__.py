"""Flexmail newsletter opt-in for storefront checkouts."""
