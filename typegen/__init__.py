"""
A type-directed random program generator, for fuzzing structural type checkers.
"""
