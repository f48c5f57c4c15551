"""Trie-based keyword matching engine.

Pure in-memory code — no I/O, no logging.
"""
