"""Link opportunity mining and opportunity scoring engine.

The modules in this package are free of ORM access: callers hand in plain
:mod:`linkscout.engine.types` records and persist whatever comes back.
"""
