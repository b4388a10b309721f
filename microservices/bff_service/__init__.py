"""Storefront BFF application: wiring, middleware and health endpoints"""
