"""Product category translator"""
