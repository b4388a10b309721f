"""Operator scripts: store bootstrap, API key verification, customer journey"""
