"""Order translator"""
