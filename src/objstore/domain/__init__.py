"""Domain layer: storage errors"""
