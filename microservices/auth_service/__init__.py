"""Customer authentication translator"""
