"""
Core utilities: exceptions, logging, paths, validation and run statistics.
"""
