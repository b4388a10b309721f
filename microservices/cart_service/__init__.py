"""Cart translator"""
