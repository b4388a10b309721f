"""Checkout translator"""
