"""Services package - search pipeline, configuration and catalog loading"""
