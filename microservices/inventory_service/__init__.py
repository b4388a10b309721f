"""Inventory translator"""
