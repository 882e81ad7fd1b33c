"""Tree representation of a single walk.

This package builds anytree nodes from the entries reported by walk, so that a
walk can be counted, iterated again and rendered like the Unix 'tree' command.
"""
