"""Domain layer — the optional container and its marker types.

This layer depends only on stdlib and the config layer.
"""
