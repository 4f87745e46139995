"""
Domain layer: task model, executor and recipes
"""
