# dynamic_value/adapters/__init__.py

"""Adapters moving values in and out: codecs, HTTP and the command line"""
