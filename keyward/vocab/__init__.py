"""Vocabulary files: YAML or plain-text keyword lists."""
