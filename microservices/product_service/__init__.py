"""Product catalogue translator"""
