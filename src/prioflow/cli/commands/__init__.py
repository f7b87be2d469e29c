"""
CLI command modules mounted on the prioflow root group
"""
