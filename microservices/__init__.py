"""Domain translators and the BFF application"""
