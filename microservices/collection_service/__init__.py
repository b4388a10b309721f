"""Product collection translator"""
