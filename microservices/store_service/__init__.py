"""Store administration translator"""
