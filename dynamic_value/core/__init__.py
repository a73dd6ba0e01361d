# dynamic_value/core/__init__.py

"""Core value model, free of I/O"""
