"""Storefront - synthetic product catalog query engine and API."""
