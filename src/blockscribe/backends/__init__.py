"""
Target Language Backends.

Each subpackage provides a `CodeGenerator` subclass and the rule groups it
supports. Rule groups common to several dialects live in `shared`.
"""
