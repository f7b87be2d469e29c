"""
Command line interface for prioflow
"""
