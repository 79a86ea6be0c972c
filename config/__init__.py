"""
Configuration Module

Paths (config.paths) and plotting constants (config.settings)
"""
