"""
Core building blocks of geomalg.

Error hierarchy, the lock capability, coordinate storage, numeric helpers,
immutable snapshots and JSON contracts. Nothing here depends on the algebra
types.
"""
